from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Optional, Sequence

import pandas as pd

from ..common.datetime_utils import now_utc, to_instant
from ..common.validators import require_positive
from ..core.constants import DEFAULT_FEEDBACK_MONTHS_LOOKBACK, DEFAULT_NOVICE_RANK, FEEDBACK_BATCH_SIZE
from ..records.model import Event, Participant
from .model import FeedbackEntry, ParticipantFeedback
from .repository import FeedbackRepository

logger = logging.getLogger(__name__)


class FeedbackReportService:
    """Collect judge feedback for novice participants over a recent window."""

    def __init__(
        self,
        feedback: FeedbackRepository,
        *,
        novice_rank: str = DEFAULT_NOVICE_RANK,
        months_lookback: int = DEFAULT_FEEDBACK_MONTHS_LOOKBACK,
        batch_size: int = FEEDBACK_BATCH_SIZE,
    ):
        self._feedback = feedback
        self._novice_rank = novice_rank
        self._months_lookback = require_positive(months_lookback, "months_lookback")
        self._batch_size = require_positive(batch_size, "batch_size")

    def window_start(self, now: datetime) -> datetime:
        return (pd.Timestamp(now) - pd.DateOffset(months=self._months_lookback)).to_pydatetime()

    def recent_events(self, events: Sequence[Event], *, now: datetime) -> list[Event]:
        start = self.window_start(now)
        return [e for e in events if e.occurred_at is not None and start <= e.occurred_at <= now]

    def novices(self, participants: Sequence[Participant]) -> list[Participant]:
        return [p for p in participants if p.rank == self._novice_rank]

    def collect(
        self,
        participants: Sequence[Participant],
        events: Sequence[Event],
        *,
        now: Optional[datetime] = None,
    ) -> list[ParticipantFeedback]:
        now = now or now_utc()
        novices = self.novices(participants)
        recent = self.recent_events(events, now=now)
        logger.info("Found %d novice debaters", len(novices))
        logger.info("Found %d events in the last %d months", len(recent), self._months_lookback)

        id_to_name = {p.participant_id: p.report_name for p in novices}
        by_name: dict[str, list[FeedbackEntry]] = {p.report_name: [] for p in novices}

        batches = [recent[i : i + self._batch_size] for i in range(0, len(recent), self._batch_size)]
        logger.info("Processing %d batches of events...", len(batches))
        for batch in batches:
            with ThreadPoolExecutor(max_workers=len(batch)) as pool:
                results = list(pool.map(lambda e: self._entries_for_event(e, id_to_name), batch))
            for entries in results:
                for name, entry in entries:
                    by_name[name].append(entry)

        out: list[ParticipantFeedback] = []
        for name, entries in by_name.items():
            if not entries:
                continue
            scores = [e.score for e in entries if e.score is not None]
            average = sum(scores) / len(scores) if scores else 0
            out.append(ParticipantFeedback(name=name, average_score=average, events=tuple(entries)))
        return out

    def _entries_for_event(self, event: Event, id_to_name: dict[str, str]) -> list[tuple[str, FeedbackEntry]]:
        feedback = self._feedback.get_event_feedback(event.event_id)
        if not feedback:
            return []

        out = []
        for participant_id, details in feedback.items():
            name = id_to_name.get(participant_id)
            if not name or not isinstance(details, dict):
                continue
            event_info = details.get("event") if isinstance(details.get("event"), dict) else {}
            score = details.get("score")
            out.append(
                (
                    name,
                    FeedbackEntry(
                        event_time=to_instant(event_info.get("time")) or event.occurred_at,
                        score=float(score) if isinstance(score, (int, float)) and not isinstance(score, bool) else None,
                        positive_feedback=details.get("positive_feedback") or "",
                        negative_feedback=details.get("negative_feedback") or "",
                        notes=details.get("notes") or "",
                    ),
                )
            )
        return out
