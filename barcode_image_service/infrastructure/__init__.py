"""Infrastructure Layer — encoding library adapters and cross-cutting concerns.

Invariants:
    - Infrastructure may import core/ types; core/ never imports infrastructure
    - Library exceptions for bad input are mapped to core/errors.py types here

Design Decisions:
    - Thin adapters over raw libraries: the render service only sees Protocols
"""
