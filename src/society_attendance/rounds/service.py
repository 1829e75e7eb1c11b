from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import tzinfo
from typing import Optional, Sequence

from ..attendance.factory import RegistrationPolicyFactory
from ..attendance.filter import filter_attendance
from ..attendance.model import DateRange, EventAttendance
from ..common.datetime_utils import format_date, format_time
from ..core.enums import CancellationMode
from ..records.model import Event, Participant

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Round:
    """One in-range event with at least one attending society member."""

    round_name: str
    date: str
    time: str
    round_id: str
    participants: tuple[str, ...]


class RoundsReportService:
    def __init__(
        self,
        *,
        policy_factory: Optional[RegistrationPolicyFactory] = None,
        cancellation_mode: CancellationMode | str = CancellationMode.STRICT,
        strict_records: bool = True,
        tz: Optional[tzinfo] = None,
    ):
        self._policy = (policy_factory or RegistrationPolicyFactory()).for_mode(cancellation_mode)
        self._strict_records = bool(strict_records)
        self._tz = tz

    def build_rounds(
        self,
        events: Sequence[Event],
        participants: Sequence[Participant],
        date_range: DateRange,
        society_id: str,
    ) -> list[Round]:
        attendance = filter_attendance(
            events,
            participants,
            date_range,
            society_id,
            policy=self._policy,
            strict=self._strict_records,
        )
        rounds = [self._to_round(a) for a in attendance if a.attendee_names]
        logger.info("Rounds for %s: %d of %d in-range events had participants", society_id, len(rounds), len(attendance))
        return rounds

    def _to_round(self, a: EventAttendance) -> Round:
        date = format_date(a.occurred_at, self._tz)
        name = " ".join(part for part in (a.subject, a.event_type, date) if part)
        return Round(
            round_name=name,
            date=date,
            time=format_time(a.occurred_at, self._tz),
            round_id=a.event_id,
            participants=a.attendee_names,
        )
