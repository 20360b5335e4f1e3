"""SQLAlchemy Repositories — CountryRepository / PersonRepository over an AsyncSession.

Invariants:
    - Each write (insert/update/remove) commits before returning
    - find_by_id returns None on a miss
    - count_where(**criteria) counts rows matching column == value for every criterion
    - A UNIQUE violation on countries.country_name surfaces as DuplicateNameError

Design Decisions:
    - One class per table, sharing _count_where: explicit queries, no generic base
    - remove() loads then deletes through the session so the identity map stays consistent
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from person_registry.core.domain_types import CountryId, PersonId
from person_registry.core.errors import DuplicateNameError
from person_registry.models.country import Country
from person_registry.models.person import Person

logger = logging.getLogger(__name__)


async def _count_where(db: AsyncSession, model: type, **criteria: object) -> int:
    query = select(func.count()).select_from(model).filter_by(**criteria)
    result = await db.execute(query)
    return result.scalar_one()


class SqlAlchemyCountryRepository:
    """Country persistence backed by the countries table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def insert(self, country: Country) -> None:
        self.db.add(country)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(f"Country insert violated uniqueness: {e}")
            raise DuplicateNameError(country.country_name) from e

    async def list_all(self) -> list[Country]:
        result = await self.db.execute(select(Country))
        return list(result.scalars().all())

    async def find_by_id(self, country_id: CountryId) -> Country | None:
        result = await self.db.execute(
            select(Country).where(Country.country_id == country_id),
        )
        return result.scalar_one_or_none()

    async def count_where(self, **criteria: object) -> int:
        return await _count_where(self.db, Country, **criteria)


class SqlAlchemyPersonRepository:
    """Person persistence backed by the persons table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def insert(self, person: Person) -> None:
        self.db.add(person)
        await self.db.commit()

    async def list_all(self) -> list[Person]:
        result = await self.db.execute(select(Person))
        return list(result.scalars().all())

    async def find_by_id(self, person_id: PersonId) -> Person | None:
        result = await self.db.execute(
            select(Person).where(Person.person_id == person_id),
        )
        return result.scalar_one_or_none()

    async def update(self, person: Person) -> None:
        await self.db.merge(person)
        await self.db.commit()

    async def remove(self, person_id: PersonId) -> None:
        person = await self.find_by_id(person_id)
        if person is None:
            return
        await self.db.delete(person)
        await self.db.commit()

    async def count_where(self, **criteria: object) -> int:
        return await _count_where(self.db, Person, **criteria)
