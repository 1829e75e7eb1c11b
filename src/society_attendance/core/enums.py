from __future__ import annotations

from enum import Enum


class CancellationMode(str, Enum):
    """Which registration flags exclude a participant from an event."""

    STRICT = "strict"
    CANCELLED_ONLY = "cancelled_only"


class ReportColumn(str, Enum):
    """Localized column headers used in spreadsheet exports."""

    WEEK = "שבוע"
    PARTICIPANTS = "משתתפים"
    NAME = "שם"
    PERCENTAGE = "אחוז השתתפות"
    ROUND_NAME = "שם הסיבוב"
    DATE = "תאריך"
    TIME = "שעה"
    ROUND_ID = "DB ID"
