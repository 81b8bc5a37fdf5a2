"""Aggregate time allocation over an analysis range."""

from datetime import date

from models.entities import Event, TimeStatistics
from models.errors import RangeError
from services.analysis_config import DEFAULT_SETTINGS, AnalysisSettings
from services.time_arithmetic import duration_minutes


def count_days(range_start: date, range_end: date) -> int:
    """Inclusive number of calendar days in the range."""
    if range_end < range_start:
        raise RangeError.for_dates(range_start, range_end)
    return (range_end - range_start).days + 1


def compute_statistics(
    events: list[Event],
    range_start: date,
    range_end: date,
    settings: AnalysisSettings = DEFAULT_SETTINGS,
) -> TimeStatistics:
    """
    Split the waking hours of the range into work, study, activity and rest.

    Deadlines count half as work and half as study. Rest is whatever waking
    time is left once every in-range event is accounted for.
    """
    days = count_days(range_start, range_end)

    work_hours = 0.0
    study_hours = 0.0
    activity_hours = 0.0

    for event in events:
        if not range_start <= event.date <= range_end:
            continue
        hours = duration_minutes(event.start, event.end) / 60

        if event.category == "paid-work":
            work_hours += hours
        elif event.category == "class":
            study_hours += hours
        elif event.category == "deadline":
            work_hours += hours * 0.5
            study_hours += hours * 0.5
        else:
            activity_hours += hours

    waking_hours = settings.waking_hours_per_day * days
    rest_hours = max(0.0, waking_hours - work_hours - study_hours - activity_hours)
    total = work_hours + study_hours + rest_hours + activity_hours

    def percentage(hours: float) -> float:
        return hours / total * 100 if total > 0 else 0.0

    return TimeStatistics(
        work_hours=work_hours,
        study_hours=study_hours,
        rest_hours=rest_hours,
        activity_hours=activity_hours,
        total_hours=total,
        work_percentage=percentage(work_hours),
        study_percentage=percentage(study_hours),
        rest_percentage=percentage(rest_hours),
        activity_percentage=percentage(activity_hours),
    )
