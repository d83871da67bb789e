"""Core - domain types, error hierarchy, and persistence contracts.

Invariants:
    - Nothing in core/ imports from api/, repositories/, or infrastructure/
"""
