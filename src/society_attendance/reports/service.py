from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from ..attendance.model import AttendanceReport
from ..core.constants import (
    ATTENDANCE_XLSX_FILE,
    FEEDBACK_JSON_FILE,
    PARTICIPATION_TSV_FILE,
    ROUNDS_JSON_FILE,
    ROUNDS_XLSX_FILE,
    WEEKLY_TSV_FILE,
)
from ..feedback.model import ParticipantFeedback
from ..rounds.service import Round
from .formatter import PARTICIPATION_COLUMNS, ROUNDS_COLUMNS, WEEKLY_COLUMNS, ReportFormatter
from .writers import write_excel, write_json, write_tsv


class ReportExportService:
    """Write finished reports into the output directory.

    Every export overwrites its files, so re-running on the same input gives
    the same output.
    """

    def __init__(self, output_dir: Path, *, formatter: Optional[ReportFormatter] = None):
        self._output_dir = Path(output_dir)
        self._formatter = formatter or ReportFormatter()

    def export_attendance(self, report: AttendanceReport, *, excel: bool = True) -> list[Path]:
        f = self._formatter
        paths = [
            write_tsv(self._output_dir / WEEKLY_TSV_FILE, f.weekly_rows(report)),
            write_tsv(self._output_dir / PARTICIPATION_TSV_FILE, f.participation_rows(report.participation)),
        ]
        if excel:
            paths.append(
                write_excel(
                    self._output_dir / ATTENDANCE_XLSX_FILE,
                    {"Weeks": f.weekly_sheet(report), "Participation": f.participation_sheet(report)},
                    columns={"Weeks": WEEKLY_COLUMNS, "Participation": PARTICIPATION_COLUMNS},
                )
            )
        return paths

    def export_rounds(self, rounds: Sequence[Round], *, excel: bool = True) -> list[Path]:
        paths = [write_json(self._output_dir / ROUNDS_JSON_FILE, self._formatter.rounds_document(rounds))]
        if excel:
            paths.append(
                write_excel(
                    self._output_dir / ROUNDS_XLSX_FILE,
                    {"Rounds": self._formatter.rounds_sheet(rounds)},
                    columns={"Rounds": ROUNDS_COLUMNS},
                )
            )
        return paths

    def export_feedback(self, feedback: Sequence[ParticipantFeedback]) -> Path:
        return write_json(self._output_dir / FEEDBACK_JSON_FILE, self._formatter.feedback_document(feedback))
