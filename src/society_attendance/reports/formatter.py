from __future__ import annotations

from dataclasses import asdict
from typing import Sequence

from ..attendance.model import AttendanceReport, ParticipationReport, WeekBucket
from ..common.datetime_utils import to_timestamp_map
from ..core.constants import NO_SESSION_TEXT
from ..core.enums import ReportColumn
from ..feedback.model import ParticipantFeedback
from ..rounds.service import Round


WEEKLY_COLUMNS = (ReportColumn.WEEK.value, ReportColumn.PARTICIPANTS.value)
PARTICIPATION_COLUMNS = (ReportColumn.NAME.value, ReportColumn.PERCENTAGE.value)
ROUNDS_COLUMNS = (
    ReportColumn.ROUND_NAME.value,
    ReportColumn.DATE.value,
    ReportColumn.TIME.value,
    ReportColumn.ROUND_ID.value,
    ReportColumn.PARTICIPANTS.value,
)


class ReportFormatter:
    """Turn report structures into plain rows for the file writers."""

    def __init__(self, *, empty_week_text: str = NO_SESSION_TEXT):
        self._empty_week_text = empty_week_text

    def week_text(self, week: WeekBucket) -> str:
        return ", ".join(week.attendee_names) if week.attendee_names else self._empty_week_text

    def weekly_rows(self, report: AttendanceReport) -> list[tuple[str, str]]:
        return [(w.label, self.week_text(w)) for w in report.weeks]

    def participation_rows(self, participation: ParticipationReport) -> list[tuple[str, str]]:
        return [(e.name, f"{e.percentage}%") for e in participation.entries]

    def weekly_sheet(self, report: AttendanceReport) -> list[dict]:
        return [
            {ReportColumn.WEEK.value: label, ReportColumn.PARTICIPANTS.value: text}
            for label, text in self.weekly_rows(report)
        ]

    def participation_sheet(self, report: AttendanceReport) -> list[dict]:
        return [
            {ReportColumn.NAME.value: name, ReportColumn.PERCENTAGE.value: pct}
            for name, pct in self.participation_rows(report.participation)
        ]

    def rounds_sheet(self, rounds: Sequence[Round]) -> list[dict]:
        return [
            {
                ReportColumn.ROUND_NAME.value: r.round_name,
                ReportColumn.DATE.value: r.date,
                ReportColumn.TIME.value: r.time,
                ReportColumn.ROUND_ID.value: r.round_id,
                ReportColumn.PARTICIPANTS.value: ", ".join(r.participants),
            }
            for r in rounds
        ]

    def rounds_document(self, rounds: Sequence[Round]) -> dict:
        """Keyed by round name; a later round with the same name wins."""
        return {
            r.round_name: {
                "date": r.date,
                "time": r.time,
                "roundId": r.round_id,
                "participants": list(r.participants),
            }
            for r in rounds
        }

    def feedback_document(self, feedback: Sequence[ParticipantFeedback]) -> dict:
        out = {}
        for item in feedback:
            events = []
            for entry in item.events:
                row = asdict(entry)
                row["event_time"] = to_timestamp_map(entry.event_time) if entry.event_time else None
                events.append(row)
            out[item.name] = {"average_score": item.average_score, "events": events}
        return out
