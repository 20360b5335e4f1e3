"""Person Registry API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PersonRegistryError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: cleaner startup/shutdown pairing
    - Reference data seeded on startup only when SEED_REFERENCE_DATA is set

Run:
    uvicorn person_registry.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from person_registry.api.error_handlers import register_error_handlers
from person_registry.api.routes import countries, health, persons
from person_registry.config import get_settings
from person_registry.db.seed import seed_reference_data
from person_registry.infrastructure.database import init_db
from person_registry.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.seed_reference_data:
        async with manager.session() as db:
            await seed_reference_data(db)
    logger.info("Person Registry API started")
    yield
    await manager.dispose()
    logger.info("Person Registry API shutting down")


app = FastAPI(
    title="Person Registry API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(countries.router)
app.include_router(persons.router)

register_error_handlers(app)
