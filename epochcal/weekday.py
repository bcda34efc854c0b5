from enum import Enum

from typing_extensions import override


class Weekday(Enum):
    """Day of the week, Sunday first."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @property
    def name_string(self) -> str:
        return _NAMES[self]

    @property
    def abbreviation(self) -> str:
        return _NAMES[self][:3]

    @override
    def __str__(self) -> str:
        return self.name_string


_NAMES: dict[Weekday, str] = {
    Weekday.SUNDAY: "Sunday",
    Weekday.MONDAY: "Monday",
    Weekday.TUESDAY: "Tuesday",
    Weekday.WEDNESDAY: "Wednesday",
    Weekday.THURSDAY: "Thursday",
    Weekday.FRIDAY: "Friday",
    Weekday.SATURDAY: "Saturday",
}


def day_string(day: Weekday) -> str:
    """Full English name, e.g. ``"Thursday"``."""
    return day.name_string


def day_abbrev_string(day: Weekday) -> str:
    """Three-letter abbreviation, e.g. ``"Thu"``."""
    return day.abbreviation
