"""Fixed unit constants used by the converter.

Clock units are counted in seconds; the ``NANOS_PER`` constants scale the
stored nanosecond delta down to coarser resolutions.
"""

MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR

NANOS_PER_MICROSECOND = 1_000
NANOS_PER_MILLISECOND = 1_000_000
NANOS_PER_SECOND = 1_000_000_000


def seconds_in_minute() -> int:
    return MINUTE


def seconds_in_hour() -> int:
    return HOUR


def seconds_in_day() -> int:
    return DAY
