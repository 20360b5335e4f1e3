"""Persons Service — create, read, filter, sort, update and delete persons.

Invariants:
    - add_person/update_person: None → NullArgumentError; constraint violation →
      ValidationFailureError (first violation only)
    - update_person on an unknown id → PersonNotFoundError, while
      get_person_by_person_id → None and delete_person → False for the same case
    - delete_person(None) → NullArgumentError
    - person_id generated here (uuid4) and immutable afterwards
    - Every response carries the resolved country name (None when the reference
      is absent or dangling) and the computed age

Design Decisions:
    - Repository + CountriesService injected: no global state, storage-agnostic
    - Filtering and sorting delegate to core/person_query.py (pure, sync);
      get_sorted_persons is therefore a plain method
"""

import logging
import uuid
from datetime import date

from person_registry.core.domain_types import (
    PersonField, PersonId, SortOrderOptions,
)
from person_registry.core.errors import NullArgumentError, PersonNotFoundError
from person_registry.core.person_query import filter_persons, sort_persons
from person_registry.core.repository_protocols import PersonRepository
from person_registry.models.person import Person
from person_registry.schemas.person import (
    PersonAddRequest, PersonResponse, PersonUpdateRequest,
)
from person_registry.services.countries_service import CountriesService
from person_registry.services.dto_mapping import (
    add_request_to_person, apply_update, person_to_response,
)
from person_registry.services.validation import validate_request

logger = logging.getLogger(__name__)


class PersonsService:
    """Business logic for Person records."""

    def __init__(
        self,
        repository: PersonRepository,
        countries_service: CountriesService,
        today: date | None = None,
    ):
        self.repository = repository
        self.countries_service = countries_service
        self._today = today

    async def _to_response(self, person: Person) -> PersonResponse:
        country = await self.countries_service.get_country_by_country_id(
            person.country_id,
        )
        return person_to_response(
            person,
            country_name=country.country_name if country else None,
            today=self._today,
        )

    async def add_person(
        self, person_add_request: PersonAddRequest | None,
    ) -> PersonResponse:
        if person_add_request is None:
            raise NullArgumentError("person_add_request")
        validate_request(person_add_request)

        person = add_request_to_person(person_add_request)
        person.person_id = PersonId(uuid.uuid4())
        await self.repository.insert(person)
        logger.info(
            "Person created", extra={"person_id": str(person.person_id)},
        )
        return await self._to_response(person)

    async def get_all_persons(self) -> list[PersonResponse]:
        persons = await self.repository.list_all()
        return [await self._to_response(p) for p in persons]

    async def get_person_by_person_id(
        self, person_id: PersonId | None,
    ) -> PersonResponse | None:
        if person_id is None:
            return None
        person = await self.repository.find_by_id(person_id)
        if person is None:
            return None
        return await self._to_response(person)

    async def get_filtered_persons(
        self,
        search_by: str | PersonField | None,
        search_string: str | None,
    ) -> list[PersonResponse]:
        all_persons = await self.get_all_persons()
        return filter_persons(all_persons, search_by, search_string)

    def get_sorted_persons(
        self,
        all_persons: list[PersonResponse],
        sort_by: str | PersonField | None,
        sort_order: SortOrderOptions = SortOrderOptions.ASC,
    ) -> list[PersonResponse]:
        return list(sort_persons(all_persons, sort_by, sort_order))

    async def update_person(
        self, person_update_request: PersonUpdateRequest | None,
    ) -> PersonResponse:
        if person_update_request is None:
            raise NullArgumentError("person_update_request")
        validate_request(person_update_request)

        person = await self.repository.find_by_id(
            PersonId(person_update_request.person_id),
        )
        if person is None:
            logger.warning(
                "Update rejected: unknown person",
                extra={"person_id": str(person_update_request.person_id)},
            )
            raise PersonNotFoundError(str(person_update_request.person_id))

        apply_update(person, person_update_request)
        await self.repository.update(person)
        logger.info(
            "Person updated", extra={"person_id": str(person.person_id)},
        )
        return await self._to_response(person)

    async def delete_person(self, person_id: PersonId | None) -> bool:
        if person_id is None:
            raise NullArgumentError("person_id")

        person = await self.repository.find_by_id(person_id)
        if person is None:
            return False

        await self.repository.remove(person_id)
        logger.info("Person deleted", extra={"person_id": str(person_id)})
        return True
