from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Mapping, Optional

from ..common.datetime_utils import to_instant
from ..core.constants import DEFAULT_DISPLAY_NAME_FIELD, DEFAULT_ENGLISH_NAME_FIELD


@dataclass(frozen=True)
class Registration:
    """Links one participant to one event, carrying cancellation state."""

    participant_id: str
    cancelled: bool = False
    cancelled_on_time: bool = False

    @classmethod
    def from_document(cls, participant_id: str, doc: Any) -> "Registration":
        doc = doc if isinstance(doc, dict) else {}
        return cls(
            participant_id=str(participant_id),
            cancelled=bool(doc.get("cancelled", False)),
            cancelled_on_time=bool(doc.get("cancelledOnTime", False)),
        )


@dataclass(frozen=True)
class Event:
    """A single session/round loaded from the store.

    `occurred_at` is None when the stored time field is missing or malformed;
    `registrations` is None when the event has no registrations document.
    """

    event_id: str
    occurred_at: Optional[datetime]
    registrations: Optional[Mapping[str, Registration]] = None
    subject: Optional[str] = None
    event_type: Optional[str] = None
    assignments: Mapping[str, Any] = field(default_factory=dict)

    def registration_for(self, participant_id: str) -> Optional[Registration]:
        if not self.registrations:
            return None
        return self.registrations.get(participant_id)

    @classmethod
    def from_document(cls, doc: dict) -> "Event":
        raw_regs = doc.get("registrations")
        registrations = None
        if isinstance(raw_regs, dict):
            registrations = MappingProxyType(
                {str(pid): Registration.from_document(pid, reg) for pid, reg in raw_regs.items()}
            )
        return cls(
            event_id=str(doc.get("id", "")),
            occurred_at=to_instant(doc.get("time")),
            registrations=registrations,
            subject=doc.get("event_subject") or None,
            event_type=doc.get("event_type") or None,
            assignments=MappingProxyType(dict(doc.get("assignments") or {})),
        )


@dataclass(frozen=True)
class Participant:
    participant_id: str
    display_name: str
    society: Optional[str]
    rank: Optional[str] = None
    english_name: Optional[str] = None

    @property
    def report_name(self) -> str:
        """English name when known, used by the feedback export."""
        return self.english_name or self.display_name

    @classmethod
    def from_document(
        cls,
        doc: dict,
        *,
        name_field: str = DEFAULT_DISPLAY_NAME_FIELD,
        english_name_field: str = DEFAULT_ENGLISH_NAME_FIELD,
    ) -> "Participant":
        pid = str(doc.get("id", ""))
        return cls(
            participant_id=pid,
            display_name=str(doc.get(name_field) or doc.get(english_name_field) or pid),
            society=doc.get("club"),
            rank=doc.get("rank"),
            english_name=doc.get(english_name_field) or None,
        )


@dataclass(frozen=True)
class RecordSet:
    """Everything the reports consume, loaded in one go."""

    events: tuple[Event, ...]
    participants: tuple[Participant, ...]
