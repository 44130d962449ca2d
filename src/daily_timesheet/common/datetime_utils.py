from __future__ import annotations

from datetime import date, datetime, time, timezone, tzinfo
from typing import Optional

from ..core.constants import DATE_FORMAT
from ..core.exceptions import ValidationError

DAY_START = time(0, 0, 0)
DAY_END = time(23, 59, 59, 999000)


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date: {value!r}") from None


def truncate_ms(value: datetime) -> datetime:
    """Drop sub-millisecond precision; stored instants carry milliseconds only."""
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


def parse_iso_instant(value: str, *, tz: Optional[tzinfo] = None) -> datetime:
    """Parse an ISO-8601 instant into a naive datetime in the canonical zone.

    Aware values (``Z`` or an explicit offset) are converted to ``tz`` (UTC when
    omitted) first; naive values are taken as already canonical. A date without
    a time part is not an instant and is rejected. The result is truncated to
    whole milliseconds.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"Invalid datetime: {value!r}")

    raw = value.strip()
    if not any(sep in raw for sep in ("T", "t", " ")):
        raise ValidationError(f"Invalid datetime: {value!r}")
    if raw.endswith(("Z", "z")):
        raw = raw[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError:
        raise ValidationError(f"Invalid datetime: {value!r}") from None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(tz or timezone.utc).replace(tzinfo=None)
    return truncate_ms(parsed)


def day_bounds(day: date) -> tuple[datetime, datetime]:
    """Inclusive [00:00:00.000, 23:59:59.999] range of a calendar day."""
    return datetime.combine(day, DAY_START), datetime.combine(day, DAY_END)


def format_instant(value: datetime) -> str:
    return value.isoformat(timespec="milliseconds")
