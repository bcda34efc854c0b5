"""Human-readable rendering of PostEpochTime values."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from epochcal.core import PostEpochTime


def format_time(t: "PostEpochTime") -> str:
    """Render as ``"<Wkd>, <d> <Mon> <yyyy> <HH>:<MM>:<SS>"``.

    An instant 1580610340 seconds after the epoch renders as
    ``"Sun, 2 Feb 2020 02:25:40"``.
    """
    return (
        f"{t.day_of_week().abbreviation}, {t.day_of_month()} "
        f"{t.month().abbreviation} {t.year()} "
        f"{t.hour():02}:{t.minute():02}:{t.second():02}"
    )
