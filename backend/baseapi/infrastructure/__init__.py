"""Infrastructure — adapters for the database, cache, and tax-ID service.

Invariants:
    - Each adapter satisfies a Protocol from core/repository_protocols.py
    - Process-wide singletons are created in the FastAPI lifespan, never at import time
"""
