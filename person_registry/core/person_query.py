"""Person Query — pure age computation, search filtering and ordering of person views.

Invariants:
    - Age = floor(days since birth / 365.25); None without a date of birth
    - Empty search_by or search_string → input list returned as-is (no-op filter)
    - Unknown search/sort keys → input list returned as-is (fallback, never an error)
    - Records whose searched field is empty/None PASS the filter
    - Search is a case-insensitive substring match; date of birth is matched
      against its "%d %B %Y" rendering (e.g. "02 January 1993")
    - Sorting is stable; strings compare ordinally except Gender (case-insensitive);
      None sorts first ascending, last descending

Design Decisions:
    - Closed PersonField → accessor mappings replace per-key branching
    - Operates on any object shaped like PersonView (structural), so core never
      imports the pydantic response schema
"""

import math
from datetime import date, datetime
from typing import Any, Callable, Protocol, Sequence, TypeVar
from uuid import UUID

from person_registry.core.domain_types import PersonField, SortOrderOptions

DATE_OF_BIRTH_SEARCH_FORMAT = "%d %B %Y"
DAYS_PER_YEAR = 365.25


class PersonView(Protocol):
    """Structural contract for the person records filtered and sorted here."""
    person_name: str | None
    email: str | None
    date_of_birth: date | None
    gender: str | None
    country_id: UUID | None
    country: str | None
    address: str | None
    receive_news_letters: bool
    age: int | None


P = TypeVar("P", bound=PersonView)


def compute_age(date_of_birth: date | None, today: date | None = None) -> int | None:
    """Whole years between date_of_birth and today, using 365.25-day years."""
    if date_of_birth is None:
        return None
    if isinstance(date_of_birth, datetime):
        date_of_birth = date_of_birth.date()
    today = today or date.today()
    return math.floor((today - date_of_birth).days / DAYS_PER_YEAR)


def format_date_of_birth(date_of_birth: date | None) -> str | None:
    if date_of_birth is None:
        return None
    return date_of_birth.strftime(DATE_OF_BIRTH_SEARCH_FORMAT)


# ─── Filtering ───────────────────────────────────────────────────

_SEARCH_ACCESSORS: dict[PersonField, Callable[[PersonView], str | None]] = {
    PersonField.PERSON_NAME: lambda p: p.person_name,
    PersonField.EMAIL: lambda p: p.email,
    PersonField.DATE_OF_BIRTH: lambda p: format_date_of_birth(p.date_of_birth),
    PersonField.GENDER: lambda p: p.gender,
    PersonField.ADDRESS: lambda p: p.address,
}


def filter_persons(
    persons: list[P],
    search_by: "str | PersonField | None",
    search_string: str | None,
) -> list[P]:
    """Keep persons whose search_by field contains search_string (case-insensitive)."""
    if not search_by or not search_string:
        return persons
    search_field = PersonField.parse(search_by)
    accessor = _SEARCH_ACCESSORS.get(search_field) if search_field else None
    if accessor is None:
        return persons

    needle = search_string.lower()
    return [p for p in persons if _matches(accessor(p), needle)]


def _matches(value: str | None, needle: str) -> bool:
    # Empty values are kept in the result set
    if not value:
        return True
    return needle in value.lower()


# ─── Sorting ─────────────────────────────────────────────────────

_SORT_KEYS: dict[PersonField, Callable[[PersonView], Any]] = {
    PersonField.PERSON_NAME: lambda p: p.person_name,
    PersonField.EMAIL: lambda p: p.email,
    PersonField.DATE_OF_BIRTH: lambda p: p.date_of_birth,
    PersonField.ADDRESS: lambda p: p.address,
    PersonField.AGE: lambda p: p.age,
    PersonField.RECEIVE_NEWS_LETTERS: lambda p: p.receive_news_letters,
    PersonField.COUNTRY: lambda p: p.country,
    PersonField.GENDER: lambda p: p.gender.lower() if p.gender else None,
}


def sort_persons(
    persons: Sequence[P],
    sort_by: "str | PersonField | None",
    sort_order: "str | SortOrderOptions" = SortOrderOptions.ASC,
) -> Sequence[P]:
    """Stable sort by sort_by in sort_order. Unknown or empty key → input unchanged."""
    if not sort_by:
        return persons
    sort_field = PersonField.parse(sort_by)
    key = _SORT_KEYS.get(sort_field) if sort_field else None
    if key is None:
        return persons

    return sorted(
        persons,
        key=lambda p: _none_first(key(p)),
        reverse=sort_order == SortOrderOptions.DESC,
    )


def _none_first(value: Any) -> tuple[bool, Any]:
    return (value is not None, value)
