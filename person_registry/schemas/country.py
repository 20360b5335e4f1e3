"""Country Schemas — add request and response DTOs."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class CountryAddRequest(BaseModel):
    """Country creation — name is optional here, required by CountriesService."""
    country_name: str | None = Field(None, max_length=100)


class CountryResponse(BaseModel):
    """Country as returned by CountriesService."""
    model_config = ConfigDict(from_attributes=True)

    country_id: UUID
    country_name: str | None = None
