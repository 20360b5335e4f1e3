"""Services Layer — countries and persons business rules over injected repositories.

Invariants:
    - Services receive repositories by injection, never a concrete session
    - Identifiers are assigned here, never by callers
    - DTO <-> entity conversion lives in dto_mapping (pure functions)
"""
