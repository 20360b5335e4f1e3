"""DTO Mapping — per-field conversions between DTOs and ORM entities.

Invariants tested:
    - add-request conversions leave the id unset
    - gender enum ↔ string conversion in both directions
    - update round trip preserves every persisted field
"""

from datetime import date
from uuid import uuid4

import pytest

from person_registry.core.domain_types import GenderOptions
from person_registry.models.country import Country
from person_registry.models.person import Person
from person_registry.schemas.country import CountryAddRequest
from person_registry.schemas.person import (
    PersonAddRequest, PersonResponse, PersonUpdateRequest,
)
from person_registry.services.dto_mapping import (
    add_request_to_country, add_request_to_person, apply_update,
    country_to_response, person_to_response, response_to_update_request,
    update_request_to_person,
)

TODAY = date(2026, 10, 19)
COUNTRY_ID = uuid4()

PERSISTED_FIELDS = (
    "person_name", "email", "date_of_birth", "gender",
    "country_id", "address", "receive_news_letters",
)


@pytest.fixture
def add_request() -> PersonAddRequest:
    return PersonAddRequest(
        person_name="Jasmina",
        email="jsyddie1@example.com",
        date_of_birth=date(1991, 6, 24),
        gender=GenderOptions.FEMALE,
        country_id=COUNTRY_ID,
        address="0742 Fieldstone Lane",
        receive_news_letters=True,
    )


# --- Country ------------------------------------------------------------------

def test_add_request_to_country_copies_name_without_id():
    country = add_request_to_country(CountryAddRequest(country_name="Canada"))
    assert country.country_name == "Canada"
    assert country.country_id is None


def test_country_to_response():
    cid = uuid4()
    response = country_to_response(Country(country_id=cid, country_name="UK"))
    assert response.country_id == cid
    assert response.country_name == "UK"


# --- add_request_to_person ----------------------------------------------------

def test_add_request_to_person_leaves_id_unset(add_request):
    assert add_request_to_person(add_request).person_id is None


@pytest.mark.parametrize("field, expected", [
    ("person_name", "Jasmina"),
    ("email", "jsyddie1@example.com"),
    ("date_of_birth", date(1991, 6, 24)),
    ("gender", "Female"),
    ("country_id", COUNTRY_ID),
    ("address", "0742 Fieldstone Lane"),
    ("receive_news_letters", True),
])
def test_add_request_to_person_fields(add_request, field, expected):
    assert getattr(add_request_to_person(add_request), field) == expected


def test_add_request_to_person_without_gender():
    person = add_request_to_person(PersonAddRequest(person_name="X", email="x@y.io"))
    assert person.gender is None
    assert person.receive_news_letters is False


# --- person_to_response -------------------------------------------------------

def _person() -> Person:
    return Person(
        person_id=uuid4(),
        person_name="Kilian",
        email="kaizikowitz3@joomla.org",
        date_of_birth=date(1991, 6, 17),
        gender="Male",
        country_id=COUNTRY_ID,
        address="233 Buhler Junction",
        receive_news_letters=True,
    )


def test_person_to_response_copies_fields_and_derives_age():
    person = _person()
    response = person_to_response(person, country_name="UK", today=TODAY)
    assert response.person_id == person.person_id
    assert response.person_name == "Kilian"
    assert response.email == "kaizikowitz3@joomla.org"
    assert response.date_of_birth == date(1991, 6, 17)
    assert response.gender == "Male"
    assert response.country_id == COUNTRY_ID
    assert response.country == "UK"
    assert response.address == "233 Buhler Junction"
    assert response.receive_news_letters is True
    assert response.age == 35


def test_person_to_response_defaults_country_to_none():
    assert person_to_response(_person(), today=TODAY).country is None


def test_person_to_response_unset_newsletter_flag_is_false():
    person = Person(person_id=uuid4(), person_name="N", email="n@x.io")
    assert person_to_response(person).receive_news_letters is False


# --- update conversions -------------------------------------------------------

def test_response_to_update_request_parses_gender_case_insensitively():
    response = PersonResponse(person_id=uuid4(), gender="female", email="a@b.co")
    assert response_to_update_request(response).gender is GenderOptions.FEMALE


def test_response_to_update_request_keeps_id_and_newsletter_flag():
    response = PersonResponse(
        person_id=uuid4(), person_name="A", email="a@b.co", receive_news_letters=True,
    )
    request = response_to_update_request(response)
    assert request.person_id == response.person_id
    assert request.receive_news_letters is True


def test_update_request_to_person_carries_id():
    pid = uuid4()
    person = update_request_to_person(
        PersonUpdateRequest(person_id=pid, person_name="A", email="a@b.co"),
    )
    assert person.person_id == pid


def test_apply_update_replaces_mutable_fields_but_not_id():
    person = _person()
    original_id = person.person_id
    apply_update(person, PersonUpdateRequest(
        person_id=uuid4(), person_name="New", email="new@x.io",
        gender=GenderOptions.OTHER,
    ))
    assert person.person_id == original_id
    assert person.person_name == "New"
    assert person.email == "new@x.io"
    assert person.gender == "Other"
    assert person.date_of_birth is None
    assert person.country_id is None
    assert person.address is None
    assert person.receive_news_letters is False


def test_round_trip_preserves_persisted_fields(add_request):
    person = add_request_to_person(add_request)
    person.person_id = uuid4()

    response = person_to_response(person, country_name="Canada", today=TODAY)
    round_tripped = update_request_to_person(response_to_update_request(response))

    assert round_tripped.person_id == person.person_id
    for field in PERSISTED_FIELDS:
        assert getattr(round_tripped, field) == getattr(person, field), field
