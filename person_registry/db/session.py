"""Script Engine & Sessions — async DB access outside FastAPI (seeding, one-off scripts).

Invariants:
    - The caller owns the returned engine and disposes it when done
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine,
)


def create_session_factory(
    database_url: str,
) -> tuple[AsyncEngine, async_sessionmaker[AsyncSession]]:
    """Create an engine for database_url and a session factory bound to it."""
    engine = create_async_engine(database_url, echo=False)
    return engine, async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
