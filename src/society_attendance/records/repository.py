from __future__ import annotations

from typing import Protocol, Sequence


class RecordSource(Protocol):
    """Remote store of raw event and participant documents."""

    def fetch_event_documents(self) -> Sequence[dict]:
        """Events with their `assignments` and `registrations` maps attached."""

        raise NotImplementedError

    def fetch_participant_documents(self) -> Sequence[dict]:
        raise NotImplementedError
