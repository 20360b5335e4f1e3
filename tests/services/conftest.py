"""Service test fixtures — async DB, wired services and a FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys
      enforced (PRAGMA foreign_keys=ON), as PostgreSQL would
    - get_db dependency overridden to use the test DB session
    - db_manager patched so the readiness probe sees the test engine
    - PersonsService pinned to TODAY so ages are deterministic
"""

from datetime import date

import pytest
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from person_registry.db.base import Base
from person_registry.infrastructure.database import get_db, DatabaseSessionManager
from person_registry.infrastructure.repositories import (
    SqlAlchemyCountryRepository, SqlAlchemyPersonRepository,
)
from person_registry.models import Country, Person  # noqa: F401
from person_registry.services.countries_service import CountriesService
from person_registry.services.persons_service import PersonsService
import person_registry.infrastructure.database as db_module
from person_registry.main import app

TODAY = date(2026, 10, 19)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def countries_service(test_db):
    return CountriesService(SqlAlchemyCountryRepository(test_db))


@pytest.fixture
def persons_service(test_db, countries_service):
    return PersonsService(
        SqlAlchemyPersonRepository(test_db), countries_service, today=TODAY,
    )


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
