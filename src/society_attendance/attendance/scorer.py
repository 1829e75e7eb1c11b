from __future__ import annotations

from typing import Sequence

from .model import ParticipationEntry, ParticipationReport, WeekBucket


def score_participation(weeks: Sequence[WeekBucket]) -> ParticipationReport:
    """Percentage of all weeks (empty ones included) each attendee showed up.

    Names that never appear are omitted. Sorted by descending share, ties
    alphabetically by name.
    """

    total_weeks = len(weeks)
    counts: dict[str, int] = {}
    for week in weeks:
        for name in week.attendee_names:
            counts[name] = counts.get(name, 0) + 1

    entries = [ParticipationEntry(name=name, weeks_attended=n, total_weeks=total_weeks) for name, n in counts.items()]
    entries.sort(key=lambda e: (-e.weeks_attended, e.name))
    return ParticipationReport(entries=tuple(entries), total_weeks=total_weeks)
