from __future__ import annotations

from datetime import timezone

from society_attendance.rounds.service import RoundsReportService
from tests.helpers import make_event, utc


def test_rounds_skip_events_without_society_participants(participants, february_range):
    events = [
        make_event("E1", utc(2024, 2, 3, 19, 30), {"P1": "active", "P2": "cancelled"}, subject="Motion", event_type="BP"),
        make_event("E2", utc(2024, 2, 5, 18, 0), {"P3": "active"}),
        make_event("E3", utc(2024, 2, 20, 18, 0), {"P1": "active"}),
    ]

    rounds = RoundsReportService(tz=timezone.utc).build_rounds(events, participants, february_range, "IDC")

    assert len(rounds) == 1
    r = rounds[0]
    assert r.round_name == "Motion BP 03/02/2024"
    assert r.date == "03/02/2024"
    assert r.time == "19:30:00"
    assert r.round_id == "E1"
    assert r.participants == ("P1",)


def test_round_name_skips_missing_parts(participants, february_range):
    events = [make_event("E1", utc(2024, 2, 3), {"P1": "active", "P2": "active"}, event_type="Practice")]

    rounds = RoundsReportService(tz=timezone.utc).build_rounds(events, participants, february_range, "IDC")

    assert rounds[0].round_name == "Practice 03/02/2024"
    assert rounds[0].participants == ("P1", "P2")
