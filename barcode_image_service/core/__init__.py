"""Core Layer — pure request validation and bit-matrix logic, no IO.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from the library-calling shell
"""
