from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class FeedbackEntry:
    """Judge feedback one participant received for one event."""

    event_time: Optional[datetime]
    score: Optional[float]
    positive_feedback: str = ""
    negative_feedback: str = ""
    notes: str = ""


@dataclass(frozen=True)
class ParticipantFeedback:
    name: str
    average_score: float
    events: tuple[FeedbackEntry, ...]
