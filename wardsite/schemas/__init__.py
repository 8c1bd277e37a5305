"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - auxiliary is never accepted from a request body; it comes from the URL

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
