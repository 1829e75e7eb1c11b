from __future__ import annotations

import logging
from datetime import tzinfo
from typing import Optional, Sequence

from ..core.enums import CancellationMode
from ..records.model import Event, Participant
from .aggregator import aggregate_weekly
from .factory import RegistrationPolicyFactory
from .filter import filter_attendance
from .model import AttendanceReport, DateRange
from .scorer import score_participation

logger = logging.getLogger(__name__)


class AttendanceReportService:
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

    def build_report(
        self,
        events: Sequence[Event],
        participants: Sequence[Participant],
        date_range: DateRange,
        society_id: str,
    ) -> AttendanceReport:
        attendance = filter_attendance(
            events,
            participants,
            date_range,
            society_id,
            policy=self._policy,
            strict=self._strict_records,
        )
        weeks = aggregate_weekly(attendance, date_range, tz=self._tz)
        participation = score_participation(weeks)
        logger.info(
            "Attendance for %s: %d events in range, %d weeks, %d participants",
            society_id,
            len(attendance),
            len(weeks),
            len(participation.entries),
        )
        return AttendanceReport(weeks=tuple(weeks), participation=participation)
