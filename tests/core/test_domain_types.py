"""Domain Types — verifies identity wrappers and the closed enumerations.

Tests:
    - NewType wrappers exist and compare equal to the wrapped UUID
    - GenderOptions has exactly three members and parses case-insensitively
    - PersonField.parse maps public keys and returns None for unknown ones
"""

from uuid import uuid4

from person_registry.core.domain_types import (
    CountryId, PersonId, GenderOptions, SortOrderOptions, PersonField,
)


def test_identity_types_wrap_uuid():
    uid = uuid4()
    assert CountryId(uid) == uid
    assert PersonId(uid) == uid


def test_gender_options_has_three_members():
    assert [g.value for g in GenderOptions] == ["Male", "Female", "Other"]


def test_gender_parse_is_case_insensitive():
    assert GenderOptions.parse("male") is GenderOptions.MALE
    assert GenderOptions.parse("FEMALE") is GenderOptions.FEMALE
    assert GenderOptions.parse(" Other ") is GenderOptions.OTHER


def test_gender_parse_returns_none_for_blank_or_unknown():
    assert GenderOptions.parse(None) is None
    assert GenderOptions.parse("") is None
    assert GenderOptions.parse("robot") is None


def test_sort_order_values():
    assert SortOrderOptions("ASC") is SortOrderOptions.ASC
    assert SortOrderOptions.DESC.value == "DESC"


def test_person_field_parse_known_keys():
    assert PersonField.parse("PersonName") is PersonField.PERSON_NAME
    assert PersonField.parse("ReceiveNewsLetters") is PersonField.RECEIVE_NEWS_LETTERS
    assert PersonField.parse(PersonField.AGE) is PersonField.AGE


def test_person_field_parse_unknown_or_empty_is_none():
    assert PersonField.parse("Nickname") is None
    assert PersonField.parse("personname") is None
    assert PersonField.parse("") is None
    assert PersonField.parse(None) is None
