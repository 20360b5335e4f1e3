"""Reference Data Seeding — fixed countries and sample persons for an empty database.

Invariants:
    - Seeds only when the countries table is empty (idempotent across restarts)
    - Seed rows go through the repositories, never the services: identifiers are
      fixed so sample persons can reference seeded countries

Usage:
    python -m person_registry.db.seed
"""

import asyncio
import logging
import uuid
from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from person_registry.config import get_settings
from person_registry.core.domain_types import GenderOptions
from person_registry.db.session import create_session_factory
from person_registry.infrastructure.observability import setup_logging
from person_registry.infrastructure.repositories import (
    SqlAlchemyCountryRepository, SqlAlchemyPersonRepository,
)
from person_registry.models.country import Country
from person_registry.models.person import Person

logger = logging.getLogger(__name__)

SEED_COUNTRIES: list[tuple[str, str]] = [
    ("000C76EB-62E9-4465-96D1-2C41FDB64C3B", "USA"),
    ("32DA506B-3EBA-48A4-BD86-5F93A2E19E3F", "Canada"),
    ("DF7C89CE-3341-4246-84AE-E01AB7BA476E", "UK"),
    ("15889048-AF93-412C-B8F3-22103E943A6D", "India"),
    ("80DF255C-EFE7-49E5-A7F9-C35D7C701CAB", "Australia"),
]

# (person_id, name, email, date_of_birth, gender, address, newsletters, country_id)
SEED_PERSONS: list[tuple[str, str, str, str, GenderOptions, str, bool, str]] = [
    ("8082ED0C-396D-4162-AD1D-29A13F929824", "Aguste", "aleddy0@booking.com",
     "1993-01-02", GenderOptions.MALE, "0858 Novick Terrace", False,
     "000C76EB-62E9-4465-96D1-2C41FDB64C3B"),
    ("06D15BAD-52F4-498E-B478-ACAD847ABFAA", "Jasmina", "jsyddie1@miibeian.gov.cn",
     "1991-06-24", GenderOptions.FEMALE, "0742 Fieldstone Lane", True,
     "32DA506B-3EBA-48A4-BD86-5F93A2E19E3F"),
    ("D3EA677A-0F5B-41EA-8FEF-EA2FC41900FD", "Kendall", "khaquard2@arstechnica.com",
     "1993-08-13", GenderOptions.MALE, "7050 Pawling Alley", False,
     "32DA506B-3EBA-48A4-BD86-5F93A2E19E3F"),
    ("89452EDB-BF8C-4283-9BA4-8259FD4A7A76", "Kilian", "kaizikowitz3@joomla.org",
     "1991-06-17", GenderOptions.MALE, "233 Buhler Junction", True,
     "DF7C89CE-3341-4246-84AE-E01AB7BA476E"),
    ("F5BD5979-1DC1-432C-B1F1-DB5BCCB0E56D", "Dulcinea", "dbus4@pbs.org",
     "1996-09-02", GenderOptions.FEMALE, "56 Sundown Point", False,
     "DF7C89CE-3341-4246-84AE-E01AB7BA476E"),
    ("A795E22D-FAED-42F0-B134-F3B89B8683E5", "Corabelle", "cadams5@t-online.de",
     "1993-10-23", GenderOptions.FEMALE, "4489 Hazelcrest Place", False,
     "15889048-AF93-412C-B8F3-22103E943A6D"),
    ("3C12D8E8-3C1C-4F57-B6A4-C8CAAC893D7A", "Faydra", "fbischof6@boston.com",
     "1996-02-14", GenderOptions.FEMALE, "2010 Farragut Pass", True,
     "80DF255C-EFE7-49E5-A7F9-C35D7C701CAB"),
    ("7B75097B-BFF2-459F-8EA8-63742BBD7AFB", "Oby", "oclutheram7@foxnews.com",
     "1992-05-31", GenderOptions.MALE, "2 Fallview Plaza", False,
     "80DF255C-EFE7-49E5-A7F9-C35D7C701CAB"),
    ("6717C42D-16EC-4F15-80D8-4C7413E250CB", "Seumas", "ssimonitto8@biglobe.ne.jp",
     "1999-02-02", GenderOptions.MALE, "76779 Norway Maple Crossing", False,
     "80DF255C-EFE7-49E5-A7F9-C35D7C701CAB"),
    ("6E789C86-C8A6-4F18-821C-2ABDB2E95982", "Freemon", "faugustin9@vimeo.com",
     "1996-04-27", GenderOptions.MALE, "8754 Becker Street", False,
     "80DF255C-EFE7-49E5-A7F9-C35D7C701CAB"),
]


async def seed_reference_data(db: AsyncSession) -> bool:
    """Insert SEED_COUNTRIES and SEED_PERSONS. Returns False if data already exists."""
    countries = SqlAlchemyCountryRepository(db)
    if await countries.count_where() > 0:
        logger.info("Seed skipped: countries already present")
        return False

    for country_id, name in SEED_COUNTRIES:
        await countries.insert(
            Country(country_id=uuid.UUID(country_id), country_name=name),
        )

    persons = SqlAlchemyPersonRepository(db)
    for (person_id, name, email, dob, gender, address,
         newsletters, country_id) in SEED_PERSONS:
        await persons.insert(Person(
            person_id=uuid.UUID(person_id),
            person_name=name,
            email=email,
            date_of_birth=date.fromisoformat(dob),
            gender=gender.value,
            country_id=uuid.UUID(country_id),
            address=address,
            receive_news_letters=newsletters,
        ))

    logger.info(
        f"Seeded {len(SEED_COUNTRIES)} countries and {len(SEED_PERSONS)} persons",
    )
    return True


async def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    engine, session_factory = create_session_factory(settings.database_url)
    try:
        async with session_factory() as db:
            await seed_reference_data(db)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
