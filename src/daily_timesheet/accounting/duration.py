from __future__ import annotations

from datetime import datetime, timedelta

from ..common.datetime_utils import truncate_ms
from ..core.constants import MS_PER_HOUR

_ONE_MS = timedelta(milliseconds=1)


def duration_ms(start: datetime, end: datetime) -> int:
    """Whole milliseconds from start to end; zero or negative when end <= start.

    Both instants are truncated to whole milliseconds first, matching
    what storage keeps.
    """
    return (truncate_ms(end) - truncate_ms(start)) // _ONE_MS


def ms_to_hours(ms: int) -> float:
    return ms / MS_PER_HOUR


def hours_to_ms(value: float) -> int:
    return round(value * MS_PER_HOUR)


def hours(start: datetime, end: datetime) -> float:
    """Length of [start, end] in hours.

    Not clamped: a non-positive result means an invalid range and is for the
    budget validator to reject.
    """
    return ms_to_hours(duration_ms(start, end))
