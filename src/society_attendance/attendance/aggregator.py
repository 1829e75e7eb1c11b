from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional, Sequence

from ..common.datetime_utils import format_date
from ..core.constants import WEEK_LENGTH_DAYS
from .model import DateRange, EventAttendance, WeekBucket

WEEK = timedelta(days=WEEK_LENGTH_DAYS)


def week_label(week_start: datetime, week_end: datetime, tz: Optional[tzinfo] = None) -> str:
    return f"{format_date(week_start, tz)} - {format_date(week_end, tz)}"


def aggregate_weekly(
    attendance: Sequence[EventAttendance],
    date_range: DateRange,
    *,
    tz: Optional[tzinfo] = None,
) -> list[WeekBucket]:
    """Split the range into 7-day buckets anchored at `date_range.start`.

    Buckets advance in absolute time and the last one may run past
    `date_range.end`. Attendee names are de-duplicated per bucket, in the
    order they are first seen. Labels use `tz`, or the start's own zone.
    """

    tz = tz or date_range.start.tzinfo
    end = date_range.end.astimezone(timezone.utc)
    cursor = date_range.start.astimezone(timezone.utc)

    buckets: list[WeekBucket] = []
    while cursor < end:
        week_end = cursor + WEEK
        names: dict[str, None] = {}
        for record in attendance:
            if cursor <= record.occurred_at < week_end:
                names.update(dict.fromkeys(record.attendee_names))
        buckets.append(
            WeekBucket(
                label=week_label(cursor, week_end, tz),
                week_start=cursor.astimezone(tz),
                week_end=week_end.astimezone(tz),
                attendee_names=tuple(names),
            )
        )
        cursor = week_end
    return buckets
