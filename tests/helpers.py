"""Builders shared by the test modules."""

from __future__ import annotations

from datetime import datetime, timezone
from types import MappingProxyType

from society_attendance.records.model import Event, Participant, Registration


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def make_event(event_id, when, registrations=None, *, subject=None, event_type=None) -> Event:
    """`registrations` maps participant id -> "active" | "cancelled" | "cancelled_on_time"."""
    regs = None
    if registrations is not None:
        regs = MappingProxyType(
            {
                pid: Registration(
                    participant_id=pid,
                    cancelled=state == "cancelled",
                    cancelled_on_time=state == "cancelled_on_time",
                )
                for pid, state in registrations.items()
            }
        )
    return Event(event_id=event_id, occurred_at=when, registrations=regs, subject=subject, event_type=event_type)


def make_participant(pid, society="IDC", *, name=None, rank=None, english_name=None) -> Participant:
    return Participant(
        participant_id=pid,
        display_name=name or pid,
        society=society,
        rank=rank,
        english_name=english_name,
    )


