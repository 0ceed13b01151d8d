"""Core Layer — domain types, port contracts, and pure rules.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Pure functions stay synchronous; only port Protocols declare async methods

Design Decisions:
    - Functional core separated from imperative shell (adapters live in infrastructure/)
"""
