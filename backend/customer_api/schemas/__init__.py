"""Pydantic Schemas - request/response contracts for API endpoints.

Invariants:
    - Schemas validate at the system boundary (request bodies, response envelopes)
    - ORM models never cross the boundary un-serialized

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
