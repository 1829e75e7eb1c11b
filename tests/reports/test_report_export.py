from __future__ import annotations

import json
from decimal import Decimal

from openpyxl import load_workbook

from society_attendance.attendance.service import AttendanceReportService
from society_attendance.core.constants import NO_SESSION_TEXT
from society_attendance.core.enums import ReportColumn
from society_attendance.feedback.model import FeedbackEntry, ParticipantFeedback
from society_attendance.reports.formatter import ReportFormatter
from society_attendance.reports.service import ReportExportService
from society_attendance.rounds.service import Round
from tests.helpers import make_event, utc


def build_report(participants, february_range):
    events = [
        make_event("E1", utc(2024, 2, 3), {"P1": "active", "P2": "active"}),
        make_event("E2", utc(2024, 2, 20), {"P1": "active"}),
    ]
    return AttendanceReportService().build_report(events, participants, february_range, "IDC")


def test_weekly_rows_render_empty_week_text(participants, february_range):
    rows = ReportFormatter().weekly_rows(build_report(participants, february_range))

    assert rows == [
        ("01/02/2024 - 08/02/2024", "P1, P2"),
        ("08/02/2024 - 15/02/2024", NO_SESSION_TEXT),
    ]


def test_participation_rows_have_percent_suffix(participants, february_range):
    report = build_report(participants, february_range)

    assert report.participation.as_mapping() == {"P1": Decimal("50.00"), "P2": Decimal("50.00")}
    assert ReportFormatter().participation_rows(report.participation) == [("P1", "50.00%"), ("P2", "50.00%")]


def test_export_writes_tsv_files(tmp_path, participants, february_range):
    ReportExportService(tmp_path).export_attendance(build_report(participants, february_range), excel=False)

    assert (tmp_path / "dates.tsv").read_text(encoding="utf-8") == (
        "01/02/2024 - 08/02/2024\tP1, P2\n" f"08/02/2024 - 15/02/2024\t{NO_SESSION_TEXT}\n"
    )
    assert (tmp_path / "namesToPercent.tsv").read_text(encoding="utf-8") == "P1\t50.00%\nP2\t50.00%\n"


def test_export_is_idempotent(tmp_path, participants, february_range):
    service = ReportExportService(tmp_path)
    report = build_report(participants, february_range)

    service.export_attendance(report, excel=False)
    first = [(tmp_path / n).read_bytes() for n in ("dates.tsv", "namesToPercent.tsv")]
    service.export_attendance(report, excel=False)
    second = [(tmp_path / n).read_bytes() for n in ("dates.tsv", "namesToPercent.tsv")]

    assert first == second


def test_export_attendance_workbook_has_localized_headers(tmp_path, participants, february_range):
    ReportExportService(tmp_path).export_attendance(build_report(participants, february_range))

    wb = load_workbook(tmp_path / "attendance.xlsx")
    assert wb.sheetnames == ["Weeks", "Participation"]
    weeks = list(wb["Weeks"].iter_rows(values_only=True))
    assert weeks[0] == (ReportColumn.WEEK.value, ReportColumn.PARTICIPANTS.value)
    assert len(weeks) == 3
    participation = list(wb["Participation"].iter_rows(values_only=True))
    assert participation[1] == ("P1", "50.00%")


def test_export_rounds_json_and_workbook(tmp_path):
    rounds = [Round(round_name="BP 03/02/2024", date="03/02/2024", time="19:00:00", round_id="E1", participants=("P1", "P2"))]

    ReportExportService(tmp_path).export_rounds(rounds)

    doc = json.loads((tmp_path / "rounds.json").read_text(encoding="utf-8"))
    assert doc == {"BP 03/02/2024": {"date": "03/02/2024", "time": "19:00:00", "roundId": "E1", "participants": ["P1", "P2"]}}
    rows = list(load_workbook(tmp_path / "rounds.xlsx")["Rounds"].iter_rows(values_only=True))
    assert rows[0][0] == ReportColumn.ROUND_NAME.value
    assert rows[1] == ("BP 03/02/2024", "03/02/2024", "19:00:00", "E1", "P1, P2")


def test_export_feedback_json(tmp_path):
    feedback = [
        ParticipantFeedback(
            name="Noa",
            average_score=75.0,
            events=(FeedbackEntry(event_time=utc(2024, 3, 1), score=75.0, notes="good"),),
        )
    ]

    path = ReportExportService(tmp_path).export_feedback(feedback)

    doc = json.loads(path.read_text(encoding="utf-8"))
    assert doc["Noa"]["average_score"] == 75.0
    assert doc["Noa"]["events"][0]["event_time"] == {"_seconds": 1709251200, "_nanoseconds": 0}
    assert doc["Noa"]["events"][0]["notes"] == "good"


def test_empty_sheets_keep_their_header_row(tmp_path, participants, february_range):
    report = AttendanceReportService().build_report([], participants, february_range, "NOPE")
    service = ReportExportService(tmp_path)

    service.export_attendance(report)
    service.export_rounds([])

    participation = list(load_workbook(tmp_path / "attendance.xlsx")["Participation"].iter_rows(values_only=True))
    assert participation == [(ReportColumn.NAME.value, ReportColumn.PERCENTAGE.value)]
    rounds = list(load_workbook(tmp_path / "rounds.xlsx")["Rounds"].iter_rows(values_only=True))
    assert rounds == [
        (
            ReportColumn.ROUND_NAME.value,
            ReportColumn.DATE.value,
            ReportColumn.TIME.value,
            ReportColumn.ROUND_ID.value,
            ReportColumn.PARTICIPANTS.value,
        )
    ]
