import math
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta, timezone
from time import time_ns
from typing import Any

from dateutil.parser import isoparse
from typing_extensions import override

from epochcal.errors import DatetimeRangeError, EpochUnderflowError
from epochcal.format import format_time
from epochcal.gregorian import EPOCH_YEAR, days_in_month, days_in_year
from epochcal.month import Month
from epochcal.util import (
    DAY,
    HOUR,
    MINUTE,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_SECOND,
)
from epochcal.weekday import Weekday

EPOCH = datetime(EPOCH_YEAR, 1, 1, tzinfo=timezone.utc)

# Days in any 400 consecutive Gregorian years
_DAYS_PER_CYCLE = 146097

# 1970-01-01 was a Thursday
_WEEKDAY_ANCHOR: dict[int, Weekday] = {
    0: Weekday.THURSDAY,
    1: Weekday.FRIDAY,
    2: Weekday.SATURDAY,
    3: Weekday.SUNDAY,
    4: Weekday.MONDAY,
    5: Weekday.TUESDAY,
    6: Weekday.WEDNESDAY,
}


def _timedelta_nanos(delta: timedelta) -> int:
    seconds = delta.days * DAY + delta.seconds
    return seconds * NANOS_PER_SECOND + delta.microseconds * NANOS_PER_MICROSECOND


@dataclass(frozen=True, order=True)
class PostEpochTime:
    """An instant at or after 1970-01-01T00:00:00Z.

    Stores a single immutable count of nanoseconds since the epoch. Every
    calendar and clock field is derived from that count on demand, so
    accessors are independent of one another and never fail.

    Example:
        >>> t = PostEpochTime.from_timestamp(1580610340)
        >>> str(t)
        'Sun, 2 Feb 2020 02:25:40'
        >>> t.year(), t.month(), t.day_of_month()
        (2020, <Month.FEBRUARY: 2>, 2)
    """

    nanoseconds: int = field(default=0)

    def __post_init__(self) -> None:
        if not isinstance(self.nanoseconds, int) or isinstance(
            self.nanoseconds, bool
        ):
            raise TypeError(
                f"PostEpochTime requires an int count of nanoseconds.\n"
                f"Got {type(self.nanoseconds).__name__!r}: {self.nanoseconds!r}\n"
                f"Hint: use PostEpochTime.from_timestamp() for float seconds"
            )
        if self.nanoseconds < 0:
            raise EpochUnderflowError(self.nanoseconds)

    @classmethod
    def from_nanoseconds(cls, nanoseconds: int) -> "PostEpochTime":
        return cls(nanoseconds)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "PostEpochTime":
        """Build from a duration measured from the epoch."""
        return cls(_timedelta_nanos(delta))

    @classmethod
    def from_timestamp(cls, seconds: int | float) -> "PostEpochTime":
        """Build from Unix seconds. Floats are rounded to the nearest nanosecond."""
        if isinstance(seconds, bool) or not isinstance(seconds, (int, float)):
            raise TypeError(
                f"Timestamp must be int or float Unix seconds.\n"
                f"Got {type(seconds).__name__!r}: {seconds!r}"
            )
        if isinstance(seconds, int):
            return cls(seconds * NANOS_PER_SECOND)
        if not math.isfinite(seconds):
            raise ValueError(
                f"Timestamp must be a finite number of Unix seconds.\n"
                f"Got {seconds!r}\n"
                f"Example: PostEpochTime.from_timestamp(1580610340.5)"
            )
        return cls(round(seconds * NANOS_PER_SECOND))

    @classmethod
    def from_instant(cls, instant: Any) -> "PostEpochTime":
        """Build from a point in time given by an external clock.

        Accepts:
        - datetime: Must be timezone-aware
        - date: Taken as midnight UTC
        - str: ISO-8601, parsed with dateutil; no offset means UTC

        Raises:
            EpochUnderflowError: If the instant precedes the epoch
            TypeError: If instant is an unsupported type or naive datetime
        """
        if isinstance(instant, str):
            parsed = isoparse(instant)
            if parsed.tzinfo is None:
                parsed = parsed.replace(tzinfo=timezone.utc)
            instant = parsed
        if isinstance(instant, datetime):
            if instant.tzinfo is None:
                raise TypeError(
                    f"PostEpochTime.from_instant() requires a timezone-aware datetime.\n"
                    f"Got naive datetime: {instant!r}\n"
                    f"Hint: Add timezone info:\n"
                    f"  dt = datetime(..., tzinfo=timezone.utc)"
                )
            return cls(_timedelta_nanos(instant - EPOCH))
        if isinstance(instant, date):
            midnight = datetime.combine(instant, time.min, tzinfo=timezone.utc)
            return cls(_timedelta_nanos(midnight - EPOCH))
        raise TypeError(
            f"PostEpochTime.from_instant() accepts datetime, date, or ISO-8601 str.\n"
            f"Got {type(instant).__name__!r}: {instant!r}\n"
            f"Examples:\n"
            f"  PostEpochTime.from_instant(datetime(2020, 2, 2, tzinfo=timezone.utc))\n"
            f"  PostEpochTime.from_instant(date(2020, 2, 2))\n"
            f"  PostEpochTime.from_instant('2020-02-02T02:25:40Z')"
        )

    @classmethod
    def now(cls) -> "PostEpochTime":
        """Read the system clock."""
        return cls.from_nanoseconds(time_ns())

    @property
    def delta(self) -> timedelta:
        """Elapsed time since the epoch, truncated to microseconds.

        Raises:
            DatetimeRangeError: Past timedelta's 999999999-day limit
        """
        try:
            return timedelta(microseconds=self.microseconds_since_epoch())
        except OverflowError as e:
            raise DatetimeRangeError(self.nanoseconds, "timedelta") from e

    def to_datetime(self) -> datetime:
        """Convert to an aware UTC datetime.

        Raises:
            DatetimeRangeError: For instants in year 10000 or later
        """
        delta = self.delta
        try:
            return EPOCH + delta
        except OverflowError as e:
            raise DatetimeRangeError(self.nanoseconds, "datetime") from e

    def seconds_since_epoch(self) -> int:
        return self.nanoseconds // NANOS_PER_SECOND

    def milliseconds_since_epoch(self) -> int:
        return self.nanoseconds // NANOS_PER_MILLISECOND

    def microseconds_since_epoch(self) -> int:
        return self.nanoseconds // NANOS_PER_MICROSECOND

    def nanoseconds_since_epoch(self) -> int:
        return self.nanoseconds

    def days_since_epoch(self) -> int:
        return self.seconds_since_epoch() // DAY

    def day_of_week(self) -> Weekday:
        remainder = self.days_since_epoch() % 7
        weekday = _WEEKDAY_ANCHOR.get(remainder)
        if weekday is None:
            raise AssertionError(f"days_since_epoch % 7 produced {remainder}")
        return weekday

    def _year_split(self) -> tuple[int, int]:
        """Return (year, zero-based day within that year).

        Whole 400-year cycles are skipped first since each spans the same
        number of days; the remainder is scanned forward one year at a time.
        """
        cycles, days = divmod(self.days_since_epoch(), _DAYS_PER_CYCLE)
        year = EPOCH_YEAR + 400 * cycles
        while days >= days_in_year(year):
            days -= days_in_year(year)
            year += 1
        return year, days

    def year(self) -> int:
        return self._year_split()[0]

    def day_of_year(self) -> int:
        """Ordinal day within the year, January 1 being 1."""
        return self._year_split()[1] + 1

    def _month_split(self) -> tuple[Month, int]:
        """Return (month, zero-based day within that month)."""
        year, days = self._year_split()
        month: Month | None = Month.JANUARY
        while month is not None and days >= days_in_month(year, month):
            days -= days_in_month(year, month)
            month = month.next()
        if month is None:
            raise AssertionError(
                f"Day offset overflowed December in year {year}"
            )
        return month, days

    def month(self) -> Month:
        return self._month_split()[0]

    def day_of_month(self) -> int:
        return self._month_split()[1] + 1

    def second_in_day(self) -> int:
        return self.seconds_since_epoch() % DAY

    def hour(self) -> int:
        return self.second_in_day() // HOUR

    def second_in_hour(self) -> int:
        return self.second_in_day() % HOUR

    def minute(self) -> int:
        return self.second_in_hour() // MINUTE

    def second(self) -> int:
        return self.seconds_since_epoch() % MINUTE

    @override
    def __str__(self) -> str:
        return format_time(self)

    @override
    def __repr__(self) -> str:
        return f"PostEpochTime(nanoseconds={self.nanoseconds})"
