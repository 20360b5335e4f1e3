"""Route Dependencies — build request-scoped services on top of the DB session.

Invariants:
    - One AsyncSession per request, shared by both services of that request
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from person_registry.infrastructure.database import get_db
from person_registry.infrastructure.repositories import (
    SqlAlchemyCountryRepository, SqlAlchemyPersonRepository,
)
from person_registry.services.countries_service import CountriesService
from person_registry.services.persons_service import PersonsService


async def get_countries_service(
    db: AsyncSession = Depends(get_db),
) -> CountriesService:
    return CountriesService(SqlAlchemyCountryRepository(db))


async def get_persons_service(
    db: AsyncSession = Depends(get_db),
) -> PersonsService:
    countries_service = CountriesService(SqlAlchemyCountryRepository(db))
    return PersonsService(SqlAlchemyPersonRepository(db), countries_service)
