"""Detection and ranking of overlapping events."""

import logging
import math
from datetime import date
from itertools import combinations
from typing import Optional

from models.entities import Conflict, ConflictSeverity, Event
from services.time_arithmetic import interval

logger = logging.getLogger(__name__)

BASE_IMPACT: dict[ConflictSeverity, int] = {
    "low": -2,
    "medium": -5,
    "high": -10,
    "critical": -15,
}
IMPACT_STEP_MINUTES = 30


def group_by_date(events: list[Event]) -> dict[date, list[Event]]:
    """Partition events by calendar date, keeping input order within a date."""
    groups: dict[date, list[Event]] = {}
    for event in events:
        groups.setdefault(event.date, []).append(event)
    return groups


def overlap_minutes(first: Event, second: Event) -> int:
    """Length of the intersection of two events' intervals (0 across dates)."""
    if first.date != second.date:
        return 0
    start_a, end_a = interval(first.start, first.end)
    start_b, end_b = interval(second.start, second.end)
    return max(0, min(end_a, end_b) - max(start_a, start_b))


def classify_severity(overlap: int, duration_a: int, duration_b: int) -> ConflictSeverity:
    """
    Severity tier of an overlap; first matching rule wins.

    critical: the overlap covers the shorter event entirely
    high:     more than 60 minutes
    medium:   30 to 60 minutes
    low:      under 30 minutes
    """
    if overlap >= min(duration_a, duration_b):
        return "critical"
    if overlap > 60:
        return "high"
    if overlap >= 30:
        return "medium"
    return "low"


def score_impact(severity: ConflictSeverity, overlap: int) -> int:
    """Penalty growing with every started 30-minute block of overlap."""
    return BASE_IMPACT[severity] * math.ceil(overlap / IMPACT_STEP_MINUTES)


def conflict_suggestion(first: Event, second: Event, severity: ConflictSeverity) -> str:
    if severity in ("critical", "high"):
        return (
            f'Major conflict: "{first.title}" and "{second.title}" overlap. '
            "One of them has to be moved."
        )
    if severity == "medium":
        return (
            f'"{first.title}" and "{second.title}" partially overlap. '
            "Plan some transition time."
        )
    return (
        f'Slight overlap between "{first.title}" and "{second.title}". '
        "Make sure you have time to get from one to the other."
    )


class ConflictDetector:
    """Finds every overlapping pair of events sharing a date."""

    def build_conflict(self, first: Event, second: Event) -> Optional[Conflict]:
        """Conflict record for a pair, or None when they do not overlap."""
        overlap = overlap_minutes(first, second)
        if overlap <= 0:
            return None

        start_a, end_a = interval(first.start, first.end)
        start_b, end_b = interval(second.start, second.end)
        severity = classify_severity(overlap, end_a - start_a, end_b - start_b)

        return Conflict(
            date=first.date,
            event_a=first,
            event_b=second,
            overlap_minutes=overlap,
            severity=severity,
            suggestion=conflict_suggestion(first, second, severity),
            score_impact=score_impact(severity, overlap),
        )

    def detect(self, events: list[Event]) -> list[Conflict]:
        """
        Detect schedule conflicts.

        Each unordered pair of events on the same date is examined once, so
        a conflict between A and B is never reported a second time as B/A.

        Returns:
            Conflicts grouped by date, in input order within a date
        """
        conflicts = []

        for day, day_events in group_by_date(events).items():
            for first, second in combinations(day_events, 2):
                conflict = self.build_conflict(first, second)
                if conflict is None:
                    continue
                logger.debug(
                    "Conflict on %s: %s / %s (%d min, %s)",
                    day, first.id, second.id, conflict.overlap_minutes, conflict.severity,
                )
                conflicts.append(conflict)

        return conflicts
