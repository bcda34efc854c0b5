"""Proleptic Gregorian leap-year rules and month lengths."""

from epochcal.month import Month

EPOCH_YEAR = 1970

# February is adjusted for leap years in days_in_month()
_DAYS_IN_MONTH: dict[Month, int] = {
    Month.JANUARY: 31,
    Month.FEBRUARY: 28,
    Month.MARCH: 31,
    Month.APRIL: 30,
    Month.MAY: 31,
    Month.JUNE: 30,
    Month.JULY: 31,
    Month.AUGUST: 31,
    Month.SEPTEMBER: 30,
    Month.OCTOBER: 31,
    Month.NOVEMBER: 30,
    Month.DECEMBER: 31,
}


def is_leap_year(year: int) -> bool:
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def days_in_month(year: int, month: Month) -> int:
    """Number of days in ``month`` of ``year``, accounting for February 29."""
    if month is Month.FEBRUARY and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month]
