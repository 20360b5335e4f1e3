"""Pydantic Schemas — request/response DTOs crossing the service boundary.

Invariants:
    - Services only ever consume/produce these shapes
    - Domain enums from core/ used for enum fields

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
