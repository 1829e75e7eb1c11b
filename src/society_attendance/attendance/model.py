from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from ..common.validators import require_aware
from ..core.constants import PERCENT_QUANTUM


@dataclass(frozen=True)
class DateRange:
    """Reporting window, also the anchor for weekly bucketing."""

    start: datetime
    end: datetime

    def __post_init__(self):
        require_aware(self.start, "start")
        require_aware(self.end, "end")

    @property
    def is_empty(self) -> bool:
        return self.start >= self.end

    def contains(self, instant: datetime) -> bool:
        """Strictly inside: events exactly on a boundary are left out."""
        return self.start < instant < self.end


@dataclass(frozen=True)
class EventAttendance:
    """Society members attending one in-range event."""

    event_id: str
    occurred_at: datetime
    attendee_names: tuple[str, ...]
    subject: Optional[str] = None
    event_type: Optional[str] = None


@dataclass(frozen=True)
class WeekBucket:
    label: str
    week_start: datetime
    week_end: datetime
    attendee_names: tuple[str, ...]

    @property
    def had_session(self) -> bool:
        return bool(self.attendee_names)


@dataclass(frozen=True)
class ParticipationEntry:
    name: str
    weeks_attended: int
    total_weeks: int

    @property
    def percentage(self) -> Decimal:
        """Share of all weeks attended, rounded half-up to two decimals."""
        if self.total_weeks <= 0:
            return Decimal(0).quantize(Decimal(PERCENT_QUANTUM))
        raw = Decimal(100) * self.weeks_attended / self.total_weeks
        return raw.quantize(Decimal(PERCENT_QUANTUM), rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class ParticipationReport:
    entries: tuple[ParticipationEntry, ...]
    total_weeks: int

    def as_mapping(self) -> dict[str, Decimal]:
        return {e.name: e.percentage for e in self.entries}


@dataclass(frozen=True)
class AttendanceReport:
    weeks: tuple[WeekBucket, ...]
    participation: ParticipationReport
