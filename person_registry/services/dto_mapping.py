"""DTO Mapping — pure conversions between request/response DTOs and ORM entities.

Invariants:
    - No function assigns identifiers; add-request conversions leave the id unset
    - Gender crosses the boundary as GenderOptions on requests and as its
      string value on entities and responses
    - age is computed only in person_to_response and never written back
    - update_request_to_person(response_to_update_request(person_to_response(p)))
      reproduces every persisted field of p

Design Decisions:
    - Free functions instead of methods on the DTOs: schemas stay free of ORM imports
    - today is injectable so age is deterministic under test
"""

from datetime import date

from person_registry.core.domain_types import GenderOptions
from person_registry.core.person_query import compute_age
from person_registry.models.country import Country
from person_registry.models.person import Person
from person_registry.schemas.country import CountryAddRequest, CountryResponse
from person_registry.schemas.person import (
    PersonAddRequest, PersonResponse, PersonUpdateRequest,
)


# ─── Country ─────────────────────────────────────────────────────

def add_request_to_country(request: CountryAddRequest) -> Country:
    return Country(country_name=request.country_name)


def country_to_response(country: Country) -> CountryResponse:
    return CountryResponse(
        country_id=country.country_id, country_name=country.country_name,
    )


# ─── Person ──────────────────────────────────────────────────────

def _gender_value(gender: GenderOptions | None) -> str | None:
    return gender.value if gender is not None else None


def add_request_to_person(request: PersonAddRequest) -> Person:
    return Person(
        person_name=request.person_name,
        email=request.email,
        date_of_birth=request.date_of_birth,
        gender=_gender_value(request.gender),
        country_id=request.country_id,
        address=request.address,
        receive_news_letters=request.receive_news_letters,
    )


def update_request_to_person(request: PersonUpdateRequest) -> Person:
    return Person(
        person_id=request.person_id,
        person_name=request.person_name,
        email=request.email,
        date_of_birth=request.date_of_birth,
        gender=_gender_value(request.gender),
        country_id=request.country_id,
        address=request.address,
        receive_news_letters=request.receive_news_letters,
    )


def apply_update(person: Person, request: PersonUpdateRequest) -> Person:
    """Overwrite every mutable field of person with request's values. person_id is kept."""
    person.person_name = request.person_name
    person.email = request.email
    person.date_of_birth = request.date_of_birth
    person.gender = _gender_value(request.gender)
    person.country_id = request.country_id
    person.address = request.address
    person.receive_news_letters = request.receive_news_letters
    return person


def person_to_response(
    person: Person, country_name: str | None = None, today: date | None = None,
) -> PersonResponse:
    return PersonResponse(
        person_id=person.person_id,
        person_name=person.person_name,
        email=person.email,
        date_of_birth=person.date_of_birth,
        gender=person.gender,
        country_id=person.country_id,
        country=country_name,
        address=person.address,
        receive_news_letters=bool(person.receive_news_letters),
        age=compute_age(person.date_of_birth, today),
    )


def response_to_update_request(response: PersonResponse) -> PersonUpdateRequest:
    """Prefill an update request from a response (edit form round trip)."""
    return PersonUpdateRequest(
        person_id=response.person_id,
        person_name=response.person_name,
        email=response.email,
        date_of_birth=response.date_of_birth,
        gender=GenderOptions.parse(response.gender),
        country_id=response.country_id,
        address=response.address,
        receive_news_letters=response.receive_news_letters,
    )
