"""Person Schemas — add/update requests and the response DTO.

Invariants:
    - person_name and email: at most 40 chars; email is an EmailStr (email-validator)
    - address: at most 200 chars
    - Required fields are declared in REQUIRED_FIELDS and enforced by
      services/validation.py, so an incomplete request can still be built and
      rejected with ValidationFailureError
    - PersonResponse.gender is the GenderOptions value as stored

Design Decisions:
    - Format/length constraints via EmailStr and Field: checked again by
      the service, which covers objects mutated after construction
    - PersonResponse equality is pydantic's field-wise equality
"""

from datetime import date
from typing import ClassVar
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from person_registry.core.domain_types import GenderOptions


class PersonAddRequest(BaseModel):
    """Person creation request."""

    REQUIRED_FIELDS: ClassVar[dict[str, str]] = {
        "person_name": "Person Name is required",
        "email": "Email is required",
    }

    person_name: str | None = Field(None, max_length=40)
    email: EmailStr | None = Field(None, max_length=40)
    date_of_birth: date | None = None
    gender: GenderOptions | None = None
    country_id: UUID | None = None
    address: str | None = Field(None, max_length=200)
    receive_news_letters: bool = False


class PersonUpdateRequest(BaseModel):
    """Person update request — full replacement of every mutable field."""

    REQUIRED_FIELDS: ClassVar[dict[str, str]] = {
        "person_id": "Person ID is required",
        "person_name": "Person Name is required",
        "email": "Email is required",
    }

    person_id: UUID | None = None
    person_name: str | None = Field(None, max_length=40)
    email: EmailStr | None = Field(None, max_length=40)
    date_of_birth: date | None = None
    gender: GenderOptions | None = None
    country_id: UUID | None = None
    address: str | None = Field(None, max_length=200)
    receive_news_letters: bool = False


class PersonResponse(BaseModel):
    """Person as returned by PersonsService, with resolved country name and age."""
    person_id: UUID
    person_name: str | None = None
    email: str | None = None
    date_of_birth: date | None = None
    gender: str | None = None
    country_id: UUID | None = None
    country: str | None = None
    address: str | None = None
    receive_news_letters: bool = False
    age: int | None = None
