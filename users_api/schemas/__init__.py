"""Pydantic Schemas: request validation and response documentation.

Invariants:
    - Schemas validate at the HTTP boundary only
    - Schemas are API contracts, ORM models are persistence; neither imports the other
"""
