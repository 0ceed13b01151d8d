"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Domain dataclasses are converted with from_domain(), never returned raw

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
