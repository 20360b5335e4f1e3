"""Domain Types — identity types and closed enumerations for persons and countries.

Invariants:
    - CountryId, PersonId wrap UUIDs — never use bare UUID in domain logic
    - GenderOptions has exactly three members; its value is what gets persisted
    - PersonField values are the public search/sort keys (e.g. "PersonName")

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and query strings without custom encoders
    - parse() classmethods return None for unknown keys so callers can fall back
      to the unfiltered/unsorted list instead of raising
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

CountryId = NewType("CountryId", UUID)
PersonId = NewType("PersonId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class GenderOptions(str, Enum):
    """Gender values accepted on person requests."""
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"

    @classmethod
    def parse(cls, value: str | None) -> "GenderOptions | None":
        """Case-insensitive lookup by value; None when blank or unknown."""
        if not value:
            return None
        for member in cls:
            if member.value.lower() == value.strip().lower():
                return member
        return None


class SortOrderOptions(str, Enum):
    """Direction for get_sorted_persons."""
    ASC = "ASC"
    DESC = "DESC"


class PersonField(str, Enum):
    """Person attributes addressable by search and sort keys."""
    PERSON_NAME = "PersonName"
    EMAIL = "Email"
    DATE_OF_BIRTH = "DateOfBirth"
    GENDER = "Gender"
    COUNTRY_ID = "CountryID"
    COUNTRY = "Country"
    ADDRESS = "Address"
    AGE = "Age"
    RECEIVE_NEWS_LETTERS = "ReceiveNewsLetters"

    @classmethod
    def parse(cls, value: "str | PersonField | None") -> "PersonField | None":
        if value is None or value == "":
            return None
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None
