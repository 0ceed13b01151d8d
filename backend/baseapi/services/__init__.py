"""Services — use cases that orchestrate ports around the pure core.

Invariants:
    - Services depend on Protocols from core/repository_protocols.py, never on adapters
    - Only DuplicateKeyError escapes a service; cache and external failures are absorbed
"""
