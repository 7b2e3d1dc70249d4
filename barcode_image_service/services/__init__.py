"""Services Layer — orchestrates validation, encoding and serialization.

Invariants:
    - Services hold no per-request state between calls
"""
