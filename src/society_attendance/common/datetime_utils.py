from __future__ import annotations

from datetime import date, datetime, time, timezone, tzinfo
from typing import Any, Optional
from zoneinfo import ZoneInfo

from ..core.constants import DATE_FORMAT, TIME_FORMAT
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Invalid date {value!r}, expected YYYY-MM-DD") from exc


def get_timezone(name: str) -> tzinfo:
    try:
        return ZoneInfo(name)
    except (KeyError, ValueError) as exc:
        raise ValidationError(f"Unknown timezone {name!r}") from exc


def start_of_day(day: date, tz: tzinfo) -> datetime:
    """Local midnight of `day` as an aware datetime."""
    return datetime.combine(day, time.min, tzinfo=tz)


def now_utc() -> datetime:
    """Current time.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now(timezone.utc)


def to_instant(value: Any) -> Optional[datetime]:
    """Normalize a document-store time value into an aware UTC datetime.

    The store can hand back:
    - a ``{"_seconds": ..., "_nanoseconds": ...}`` map (exported JSON)
    - a ``datetime`` (live client)
    - a bare epoch number

    Returns None when the value is missing or not numeric.
    """

    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    if isinstance(value, dict):
        seconds = value.get("_seconds", value.get("seconds"))
        if isinstance(seconds, bool) or not isinstance(seconds, (int, float)):
            return None
        return datetime.fromtimestamp(seconds, tz=timezone.utc)

    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value, tz=timezone.utc)

    return None


def to_timestamp_map(value: datetime) -> dict[str, int]:
    """Inverse of `to_instant` for the exported JSON shape."""
    return {"_seconds": int(value.timestamp()), "_nanoseconds": value.microsecond * 1000}


def format_date(value: datetime, tz: Optional[tzinfo] = None) -> str:
    """dd/mm/yyyy in the reporting timezone."""
    return value.astimezone(tz).strftime(DATE_FORMAT) if tz else value.strftime(DATE_FORMAT)


def format_time(value: datetime, tz: Optional[tzinfo] = None) -> str:
    return value.astimezone(tz).strftime(TIME_FORMAT) if tz else value.strftime(TIME_FORMAT)
