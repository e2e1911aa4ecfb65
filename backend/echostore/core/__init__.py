"""Core Layer — pure domain logic, no HTTP, no framework imports.

Invariants:
    - No module in core/ imports from api/, schemas/, or infrastructure/
    - The record store is the only stateful object, and it owns its lock
"""
