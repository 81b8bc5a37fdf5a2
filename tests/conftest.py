"""Shared builders for the routine analyzer tests."""

from datetime import date
from itertools import count

import pytest

from models.entities import AvailabilityWindow, Event, TimeStatistics

MONDAY = date(2024, 1, 15)


@pytest.fixture
def make_event():
    """Factory for events; ids are sequential unless given."""
    ids = count(1)

    def _make(start, end, day=MONDAY, category="class", title=None, event_id=None):
        event_id = event_id or f"evt_{next(ids)}"
        return Event(
            id=event_id,
            title=title or f"Event {event_id}",
            category=category,
            date=day,
            start=start,
            end=end,
        )

    return _make


@pytest.fixture
def make_window():
    def _make(weekday, start, end=None):
        return AvailabilityWindow(weekday=weekday, start=start, end=end)

    return _make


@pytest.fixture
def make_stats():
    """Statistics with percentages derived from the given hours."""

    def _make(work=0.0, study=0.0, rest=0.0, activity=0.0, rest_pct=None):
        total = work + study + rest + activity

        def pct(hours):
            return hours / total * 100 if total else 0.0

        return TimeStatistics(
            work_hours=work,
            study_hours=study,
            rest_hours=rest,
            activity_hours=activity,
            total_hours=total,
            work_percentage=pct(work),
            study_percentage=pct(study),
            rest_percentage=pct(rest) if rest_pct is None else rest_pct,
            activity_percentage=pct(activity),
        )

    return _make
