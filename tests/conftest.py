from __future__ import annotations

import pytest

from society_attendance.attendance.model import DateRange
from society_attendance.records.model import Event, Participant
from tests.helpers import make_event, make_participant, utc


@pytest.fixture
def february_range() -> DateRange:
    return DateRange(start=utc(2024, 2, 1), end=utc(2024, 2, 15))


@pytest.fixture
def participants() -> list[Participant]:
    return [
        make_participant("P1", "IDC"),
        make_participant("P2", "IDC"),
        make_participant("P3", "OTHER"),
    ]


@pytest.fixture
def scenario_events() -> list[Event]:
    return [
        make_event("E1", utc(2024, 2, 3, 19, 0), {"P1": "active", "P2": "cancelled"}),
        make_event("E2", utc(2024, 2, 10, 19, 0), {"P1": "active"}),
    ]
