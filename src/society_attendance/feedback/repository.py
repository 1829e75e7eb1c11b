from __future__ import annotations

from typing import Optional, Protocol


class FeedbackRepository(Protocol):
    def get_event_feedback(self, event_id: str) -> Optional[dict]:
        """Mapping participant_id -> feedback details, or None if the event has none."""

        raise NotImplementedError
