"""Person ORM — persists a person record.

Invariants:
    - person_id is a UUID primary key assigned by PersonsService
    - Column lengths mirror request limits: person_name/email 40, gender 10, address 200
    - gender stores the GenderOptions value ("Male", "Female", "Other")
    - age is never persisted (computed on read)

Design Decisions:
    - Date column for date_of_birth: age and search only need day precision
    - country_id is a plain indexed column, not a FOREIGN KEY: a dangling
      reference is stored as given and resolves to no country name on read
"""

import uuid
from datetime import date

from sqlalchemy import String, Date, Boolean
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from person_registry.db.base import Base


class Person(Base):
    """Person entity."""
    __tablename__ = "persons"

    person_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True,
    )
    person_name: Mapped[str | None] = mapped_column(String(40), nullable=True)
    email: Mapped[str | None] = mapped_column(String(40), nullable=True)
    date_of_birth: Mapped[date | None] = mapped_column(Date, nullable=True)
    gender: Mapped[str | None] = mapped_column(String(10), nullable=True)
    country_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True), nullable=True, index=True,
    )
    address: Mapped[str | None] = mapped_column(String(200), nullable=True)
    receive_news_letters: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )

    def __repr__(self) -> str:
        return f"Person(person_id={self.person_id!s}, person_name={self.person_name!r})"
