"""Boundary Protocols — store contracts between the services and persistence.

Invariants:
    - Services NEVER import a concrete repository — they receive one via injection
    - Every write is atomic per call (implementation commits before returning)
    - find_by_id returns None on a miss; it never raises for "no such record"
    - count_where takes equality criteria keyed by column name

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO; the pure filtering/sorting in
      core/person_query.py stays synchronous and runs on the returned lists
"""

from datetime import date
from typing import Protocol

from person_registry.core.domain_types import CountryId, PersonId


class CountryRecord(Protocol):
    """Structural contract for persisted Country records."""
    country_id: CountryId
    country_name: str | None


class PersonRecord(Protocol):
    """Structural contract for persisted Person records."""
    person_id: PersonId
    person_name: str | None
    email: str | None
    date_of_birth: date | None
    gender: str | None
    country_id: CountryId | None
    address: str | None
    receive_news_letters: bool


class CountryRepository(Protocol):
    """Contract for country persistence — implemented by infrastructure."""
    async def insert(self, country: CountryRecord) -> None: ...
    async def list_all(self) -> list[CountryRecord]: ...
    async def find_by_id(self, country_id: CountryId) -> CountryRecord | None: ...
    async def count_where(self, **criteria: object) -> int: ...


class PersonRepository(Protocol):
    """Contract for person persistence — implemented by infrastructure."""
    async def insert(self, person: PersonRecord) -> None: ...
    async def list_all(self) -> list[PersonRecord]: ...
    async def find_by_id(self, person_id: PersonId) -> PersonRecord | None: ...
    async def update(self, person: PersonRecord) -> None: ...
    async def remove(self, person_id: PersonId) -> None: ...
    async def count_where(self, **criteria: object) -> int: ...
