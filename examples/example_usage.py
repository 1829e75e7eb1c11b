"""Example: build a report from an existing cache, without the CLI.

Controllers stay thin; the aggregation lives in the services.
"""

import importlib
from pathlib import Path

from config import get_settings_module

from society_attendance.attendance.service import AttendanceReportService
from society_attendance.container import Settings
from society_attendance.records.json_cache import JsonRecordCache
from society_attendance.records.model import Event, Participant
from society_attendance.reports.formatter import ReportFormatter


def main():
    settings = Settings.from_module(importlib.import_module(get_settings_module()))
    cache = JsonRecordCache(Path(settings.output_dir))
    events = [Event.from_document(d) for d in cache.load_events()]
    participants = [Participant.from_document(d) for d in cache.load_participants()]

    report = AttendanceReportService(cancellation_mode=settings.cancellation_mode, tz=settings.tz).build_report(
        events, participants, settings.date_range(), settings.society_id
    )
    for name, pct in ReportFormatter().participation_rows(report.participation):
        print(f"{name}\t{pct}")


if __name__ == "__main__":
    main()
