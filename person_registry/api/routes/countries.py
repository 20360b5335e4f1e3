"""Country Routes — list, create and fetch countries.

Invariants:
    - POST returns 201 with the created CountryResponse
    - GET /{country_id} turns the service's None into a 404 envelope
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from person_registry.api.dependencies import get_countries_service
from person_registry.core.domain_types import CountryId
from person_registry.core.errors import ResourceNotFoundError
from person_registry.schemas.country import CountryAddRequest, CountryResponse
from person_registry.services.countries_service import CountriesService

router = APIRouter(prefix="/api/v1/countries", tags=["countries"])


@router.get("", response_model=list[CountryResponse])
async def list_countries(
    service: CountriesService = Depends(get_countries_service),
):
    return await service.get_all_countries()


@router.post(
    "", response_model=CountryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_country(
    body: CountryAddRequest,
    service: CountriesService = Depends(get_countries_service),
):
    return await service.add_country(body)


@router.get("/{country_id}", response_model=CountryResponse)
async def get_country(
    country_id: UUID,
    service: CountriesService = Depends(get_countries_service),
):
    country = await service.get_country_by_country_id(CountryId(country_id))
    if country is None:
        raise ResourceNotFoundError("Country", str(country_id))
    return country
