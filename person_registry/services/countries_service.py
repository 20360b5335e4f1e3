"""Countries Service — validates, creates and looks up countries.

Invariants:
    - add_country: None request → NullArgumentError; None name → ValidationFailureError;
      existing name (case-sensitive exact match) → DuplicateNameError
    - country_id generated here (uuid4), never taken from the caller
    - get_country_by_country_id returns None for a None or unknown id (never raises)

Design Decisions:
    - Repository injected (CountryRepository protocol): storage-agnostic
    - Name uniqueness is checked here AND enforced by a UNIQUE constraint in the
      store; the repository maps the constraint violation to DuplicateNameError
"""

import logging
import uuid

from person_registry.core.domain_types import CountryId
from person_registry.core.errors import (
    DuplicateNameError, NullArgumentError, ValidationFailureError,
)
from person_registry.core.repository_protocols import CountryRepository
from person_registry.schemas.country import CountryAddRequest, CountryResponse
from person_registry.services.dto_mapping import (
    add_request_to_country, country_to_response,
)

logger = logging.getLogger(__name__)


class CountriesService:
    """Business logic for the Country reference table."""

    def __init__(self, repository: CountryRepository):
        self.repository = repository

    async def add_country(
        self, country_add_request: CountryAddRequest | None,
    ) -> CountryResponse:
        if country_add_request is None:
            raise NullArgumentError("country_add_request")
        if country_add_request.country_name is None:
            raise ValidationFailureError(
                "Country Name is required", "country_name",
            )

        name = country_add_request.country_name
        if await self.repository.count_where(country_name=name) > 0:
            logger.warning(f"Rejected duplicate country name: {name}")
            raise DuplicateNameError(name)

        country = add_request_to_country(country_add_request)
        country.country_id = CountryId(uuid.uuid4())
        await self.repository.insert(country)
        logger.info(
            f"Country created: {name}",
            extra={"country_id": str(country.country_id)},
        )
        return country_to_response(country)

    async def get_all_countries(self) -> list[CountryResponse]:
        countries = await self.repository.list_all()
        return [country_to_response(c) for c in countries]

    async def get_country_by_country_id(
        self, country_id: CountryId | None,
    ) -> CountryResponse | None:
        if country_id is None:
            return None
        country = await self.repository.find_by_id(country_id)
        if country is None:
            return None
        return country_to_response(country)
