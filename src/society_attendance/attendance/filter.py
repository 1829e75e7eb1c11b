from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..core.exceptions import InvalidRecordError
from ..records.model import Event, Participant
from .model import DateRange, EventAttendance
from .strategies.base import RegistrationPolicy
from .strategies.strict_policy import StrictCancellationPolicy

logger = logging.getLogger(__name__)


def filter_attendance(
    events: Iterable[Event],
    participants: Iterable[Participant],
    date_range: DateRange,
    society_id: str,
    *,
    policy: Optional[RegistrationPolicy] = None,
    strict: bool = True,
) -> list[EventAttendance]:
    """Keep in-range events and the society members who attended each.

    Malformed events (no usable timestamp) raise InvalidRecordError when
    `strict`, otherwise they are logged and skipped.
    """

    policy = policy or StrictCancellationPolicy()
    members = [p for p in participants if p.society == society_id]

    out: list[EventAttendance] = []
    for event in events:
        if event.occurred_at is None:
            if strict:
                raise InvalidRecordError(event.event_id, "missing or non-numeric time field")
            logger.warning("Skipping event %r: missing or non-numeric time field", event.event_id)
            continue
        if not date_range.contains(event.occurred_at):
            continue

        names = tuple(
            p.display_name for p in members if policy.counts_as_attendance(event.registration_for(p.participant_id))
        )
        out.append(
            EventAttendance(
                event_id=event.event_id,
                occurred_at=event.occurred_at,
                attendee_names=names,
                subject=event.subject,
                event_type=event.event_type,
            )
        )

    out.sort(key=lambda a: a.occurred_at)
    return out
