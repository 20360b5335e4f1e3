"""Infrastructure Layer — database sessions, repositories, logging.

Invariants:
    - Only this layer (and db/) imports SQLAlchemy engines/sessions
"""
