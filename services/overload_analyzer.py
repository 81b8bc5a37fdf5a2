"""Identification of overloaded days."""

import logging

from models.entities import Event, OverloadedDay, OverloadLevel, weekday_of
from services.analysis_config import DEFAULT_SETTINGS, AnalysisSettings
from services.conflict_detector import group_by_date
from services.time_arithmetic import duration_minutes

logger = logging.getLogger(__name__)


class OverloadAnalyzer:
    """Flags dates whose summed event durations reach the overload threshold."""

    def __init__(self, settings: AnalysisSettings = DEFAULT_SETTINGS):
        self.settings = settings

    def classify_level(self, total_hours: float) -> OverloadLevel:
        if total_hours >= self.settings.critical_overload_hours:
            return "critical"
        if total_hours >= self.settings.high_overload_hours:
            return "high"
        return "moderate"

    def recommendations(self, total_hours: float, events: list[Event]) -> list[str]:
        """Mitigation hints for one overloaded day."""
        level = self.classify_level(total_hours)
        if level == "critical":
            hints = [
                "Critical day: try to move at least 2-3 hours of activities elsewhere",
                "Plan 15-20 minute breaks between activities",
                "Make sure you sleep well the night before and after",
            ]
        elif level == "high":
            hints = [
                "Busy day: move 1-2 hours of activities if you can",
                "Take a 10 minute break regularly",
            ]
        else:
            hints = ["Moderately busy day: manage your energy with short breaks"]

        categories = {event.category for event in events}
        if "paid-work" in categories and "class" in categories:
            hints.append("Alternate work and study: keep a one-hour buffer between the two")

        return hints

    def analyze(self, events: list[Event]) -> list[OverloadedDay]:
        """
        Identify overloaded days.

        Returns:
            Overloaded days, worst (most busy hours) first
        """
        overloaded = []

        for day, day_events in group_by_date(events).items():
            total_minutes = sum(duration_minutes(e.start, e.end) for e in day_events)
            total_hours = total_minutes / 60
            if total_hours < self.settings.overload_hours:
                continue

            level = self.classify_level(total_hours)
            logger.debug("Overloaded day %s: %.1fh (%s)", day, total_hours, level)
            overloaded.append(OverloadedDay(
                date=day,
                weekday=weekday_of(day),
                total_minutes=total_minutes,
                events=tuple(day_events),
                level=level,
                recommendations=tuple(self.recommendations(total_hours, day_events)),
            ))

        overloaded.sort(key=lambda d: (-d.total_minutes, d.date))
        return overloaded
