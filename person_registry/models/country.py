"""Country ORM — reference table of countries persons may belong to.

Invariants:
    - country_id is a UUID primary key assigned by CountriesService
    - country_name is non-nullable and UNIQUE (store-level guard for the
      service's check-then-insert)

Design Decisions:
    - No cascade to persons: Country has no delete operation, and a dangling
      persons.country_id resolves to an absent country name on read
"""

import uuid

from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from person_registry.db.base import Base


class Country(Base):
    """Country entity."""
    __tablename__ = "countries"
    __table_args__ = (
        UniqueConstraint("country_name", name="uq_countries_country_name"),
    )

    country_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True,
    )
    country_name: Mapped[str] = mapped_column(String(100), nullable=False)

    def __repr__(self) -> str:
        return f"Country(country_id={self.country_id!s}, country_name={self.country_name!r})"
