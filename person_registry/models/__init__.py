"""ORM Models — SQLAlchemy declarative models for countries and persons.

Invariants:
    - All models inherit from Base (db/base.py)
    - Country owns zero or more Persons through persons.country_id (FK only,
      resolved by the services rather than an ORM relationship)

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete for create_all
      and Alembic autogenerate
"""

from person_registry.models.country import Country  # noqa: F401
from person_registry.models.person import Person  # noqa: F401
