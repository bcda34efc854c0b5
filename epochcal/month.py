"""Month enumeration with a canonical 1-based index.

January is 1 and December is 12. ``month_from_index`` is the inverse of
``index_from_month`` and returns None for anything outside that range, so
callers must handle the missing case themselves.
"""

from enum import Enum
from typing import Any

from typing_extensions import override


class Month(Enum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @property
    def index(self) -> int:
        return self.value

    @property
    def name_string(self) -> str:
        return _NAMES[self]

    @property
    def abbreviation(self) -> str:
        return _NAMES[self][:3]

    def next(self) -> "Month | None":
        """Return the following month, or None after December."""
        return month_from_index(self.value + 1)

    @override
    def __str__(self) -> str:
        return self.name_string


_NAMES: dict[Month, str] = {
    Month.JANUARY: "January",
    Month.FEBRUARY: "February",
    Month.MARCH: "March",
    Month.APRIL: "April",
    Month.MAY: "May",
    Month.JUNE: "June",
    Month.JULY: "July",
    Month.AUGUST: "August",
    Month.SEPTEMBER: "September",
    Month.OCTOBER: "October",
    Month.NOVEMBER: "November",
    Month.DECEMBER: "December",
}

_BY_INDEX: dict[int, Month] = {month.value: month for month in Month}


def month_string(month: Month) -> str:
    return month.name_string


def month_abbrev_string(month: Month) -> str:
    return month.abbreviation


def index_from_month(month: Month) -> int:
    return month.value


def month_from_index(index: Any) -> Month | None:
    """Return the month for a 1-based index, or None if there is no such month."""
    # bool is an int subclass; True must not alias January
    if not isinstance(index, int) or isinstance(index, bool):
        return None
    return _BY_INDEX.get(index)
