"""Exceptions raised by epochcal."""


class EpochUnderflowError(ValueError):
    """Raised when an instant precedes 1970-01-01T00:00:00Z.

    A PostEpochTime only models non-negative elapsed time, so a negative
    delta is rejected rather than clamped to the epoch.
    """

    def __init__(self, nanoseconds: int):
        self.nanoseconds: int = nanoseconds
        super().__init__(
            f"Instant precedes the epoch (1970-01-01T00:00:00Z) by "
            f"{-nanoseconds} ns.\n"
            f"PostEpochTime only represents instants at or after the epoch.\n"
            f"Example: PostEpochTime.from_instant("
            f"datetime(1970, 1, 1, tzinfo=timezone.utc))"
        )


class DatetimeRangeError(ValueError):
    """Raised when a PostEpochTime cannot be expressed as a stdlib datetime value.

    ``datetime`` stops at year 9999 and ``timedelta`` at 999999999 days, while
    the calendar accessors have no upper bound.
    """

    def __init__(self, nanoseconds: int, target: str):
        self.nanoseconds: int = nanoseconds
        super().__init__(
            f"PostEpochTime(nanoseconds={nanoseconds}) is out of range for {target}.\n"
            f"The calendar accessors still work for this value.\n"
            f"Hint: use t.year(), t.month(), t.day_of_month() or str(t) instead"
        )
