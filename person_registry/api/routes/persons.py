"""Person Routes — search/sort listing and CRUD for persons.

Invariants:
    - GET "" filters first, then sorts (defaults: sort_by=PersonName, sort_order=ASC)
    - Unknown search_by/sort_by keys fall back to the unfiltered/unsorted list
    - PUT /{person_id}: the path id overrides any id in the body
    - DELETE returns 204, or 404 when the person does not exist
    - GET /{person_id}/edit returns the prefilled PersonUpdateRequest for edit forms
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from person_registry.api.dependencies import get_persons_service
from person_registry.core.domain_types import PersonField, PersonId, SortOrderOptions
from person_registry.core.errors import ResourceNotFoundError
from person_registry.schemas.person import (
    PersonAddRequest, PersonResponse, PersonUpdateRequest,
)
from person_registry.services.dto_mapping import response_to_update_request
from person_registry.services.persons_service import PersonsService

router = APIRouter(prefix="/api/v1/persons", tags=["persons"])


@router.get("", response_model=list[PersonResponse])
async def list_persons(
    search_by: str | None = Query(None),
    search_string: str | None = Query(None),
    sort_by: str | None = Query(PersonField.PERSON_NAME.value),
    sort_order: SortOrderOptions = Query(SortOrderOptions.ASC),
    service: PersonsService = Depends(get_persons_service),
):
    persons = await service.get_filtered_persons(search_by, search_string)
    return service.get_sorted_persons(persons, sort_by, sort_order)


@router.post(
    "", response_model=PersonResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_person(
    body: PersonAddRequest,
    service: PersonsService = Depends(get_persons_service),
):
    return await service.add_person(body)


async def _get_person_or_404(
    person_id: UUID, service: PersonsService,
) -> PersonResponse:
    person = await service.get_person_by_person_id(PersonId(person_id))
    if person is None:
        raise ResourceNotFoundError("Person", str(person_id))
    return person


@router.get("/{person_id}", response_model=PersonResponse)
async def get_person(
    person_id: UUID,
    service: PersonsService = Depends(get_persons_service),
):
    return await _get_person_or_404(person_id, service)


@router.get("/{person_id}/edit", response_model=PersonUpdateRequest)
async def get_person_update_form(
    person_id: UUID,
    service: PersonsService = Depends(get_persons_service),
):
    person = await _get_person_or_404(person_id, service)
    return response_to_update_request(person)


@router.put("/{person_id}", response_model=PersonResponse)
async def update_person(
    person_id: UUID,
    body: PersonUpdateRequest,
    service: PersonsService = Depends(get_persons_service),
):
    body.person_id = person_id
    return await service.update_person(body)


@router.delete("/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_person(
    person_id: UUID,
    service: PersonsService = Depends(get_persons_service),
):
    if not await service.delete_person(PersonId(person_id)):
        raise ResourceNotFoundError("Person", str(person_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
