from .core import EPOCH, PostEpochTime
from .errors import DatetimeRangeError, EpochUnderflowError
from .format import format_time
from .gregorian import EPOCH_YEAR, days_in_month, days_in_year, is_leap_year
from .month import (
    Month,
    index_from_month,
    month_abbrev_string,
    month_from_index,
    month_string,
)
from .util import (
    DAY,
    HOUR,
    MINUTE,
    seconds_in_day,
    seconds_in_hour,
    seconds_in_minute,
)
from .weekday import Weekday, day_abbrev_string, day_string

__all__ = [
    "PostEpochTime",
    "EPOCH",
    "EPOCH_YEAR",
    "EpochUnderflowError",
    "DatetimeRangeError",
    "format_time",
    "Weekday",
    "Month",
    "day_string",
    "day_abbrev_string",
    "month_string",
    "month_abbrev_string",
    "index_from_month",
    "month_from_index",
    "is_leap_year",
    "days_in_year",
    "days_in_month",
    "seconds_in_minute",
    "seconds_in_hour",
    "seconds_in_day",
    "MINUTE",
    "HOUR",
    "DAY",
]
