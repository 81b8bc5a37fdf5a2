"""Routine analysis orchestration."""

import logging
from datetime import date
from typing import Optional

from models.entities import (
    AnalysisReport,
    AvailabilityWindow,
    Event,
    JobCompatibility,
    JobOffer,
    QuickSuggestion,
)
from services.analysis_config import DEFAULT_SETTINGS, AnalysisSettings
from services.availability_service import AvailabilityService
from services.balance_scorer import BalanceScorer
from services.conflict_detector import ConflictDetector
from services.overload_analyzer import OverloadAnalyzer
from services.time_arithmetic import duration_minutes
from services.time_statistics import compute_statistics, count_days

logger = logging.getLogger(__name__)

REQUIRED_WEEKLY_HOURS = {"job": 20, "internship": 25, "freelance": 10}


class RoutineAnalyzer:
    """Engine that analyzes a user's schedule against their availability."""

    def __init__(self, settings: Optional[AnalysisSettings] = None):
        """Initialize the analyzer and its detectors."""
        self.settings = settings or DEFAULT_SETTINGS
        self.conflict_detector = ConflictDetector()
        self.overload_analyzer = OverloadAnalyzer(self.settings)
        self.availability_service = AvailabilityService(self.settings)
        self.balance_scorer = BalanceScorer(self.settings)

    def analyze(
        self,
        events: list[Event],
        windows: list[AvailabilityWindow],
        range_start: date,
        range_end: date,
    ) -> AnalysisReport:
        """
        Analyze a schedule snapshot.

        Args:
            events: Scheduled events of one user
            windows: That user's weekly availability
            range_start: First day counted in the statistics
            range_end: Last day counted in the statistics (inclusive)

        Returns:
            The full analysis report

        Raises:
            FormatError: A time string is not "HH:MM"
            RangeError: range_end precedes range_start, or a window ends before it starts
        """
        count_days(range_start, range_end)

        conflicts = self.conflict_detector.detect(events)
        logger.info("%d conflict(s) detected", len(conflicts))

        overloaded_days = self.overload_analyzer.analyze(events)
        logger.info("%d overloaded day(s)", len(overloaded_days))

        free_slots = self.availability_service.get_free_slots(
            windows, events, range_start, range_end
        )
        logger.info("%d free slot(s) available", len(free_slots))

        stats = compute_statistics(events, range_start, range_end, self.settings)
        breakdown = self.balance_scorer.score(stats, conflicts, overloaded_days)
        score = breakdown.final_score
        logger.info("Balance score: %d/100 (raw %d)", score, breakdown.raw_total)

        return AnalysisReport(
            range_start=range_start,
            range_end=range_end,
            score=score,
            breakdown=breakdown,
            statistics=stats,
            conflicts=tuple(conflicts),
            overloaded_days=tuple(overloaded_days),
            free_slots=tuple(free_slots),
            health_summary=self.balance_scorer.health_summary(
                score, stats, conflicts, overloaded_days
            ),
        )

    def quick_suggestion(self, candidate: Event, events: list[Event]) -> QuickSuggestion:
        """Check whether a prospective event fits next to the existing ones."""
        same_day = [e for e in events if e.date == candidate.date]

        conflicts = []
        for existing in same_day:
            conflict = self.conflict_detector.build_conflict(candidate, existing)
            if conflict is not None:
                conflicts.append(conflict)

        if conflicts:
            major = any(c.severity in ("high", "critical") for c in conflicts)
            first_title = conflicts[0].event_b.title
            return QuickSuggestion(
                status="error" if major else "warning",
                message=(
                    f'Major conflict: this slot overlaps "{first_title}"'
                    if major
                    else f'Partial overlap with "{first_title}"'
                ),
                impact_score=-5 * len(conflicts),
                conflicts=tuple(conflicts),
                recommendations=(
                    "Pick another time slot",
                    "Move the existing event",
                    "Shorten one of the events",
                ),
            )

        day_minutes = sum(duration_minutes(e.start, e.end) for e in same_day)
        day_hours = (day_minutes + duration_minutes(candidate.start, candidate.end)) / 60
        if day_hours >= self.settings.busy_day_hours:
            return QuickSuggestion(
                status="warning",
                message=f"Busy day ahead ({day_hours:.1f}h of activities)",
                impact_score=-3,
                recommendations=(
                    "Plan regular breaks",
                    "Make sure to get a good night's sleep",
                    "Consider moving some activities to another day",
                ),
            )

        return QuickSuggestion(
            status="ok",
            message="This slot is free and does not overload your day",
            impact_score=0,
            recommendations=("Add this event to your schedule",),
        )

    def estimate_balance_impact(self, current_work_hours: float, new_hours: int) -> int:
        total_after = current_work_hours + new_hours
        if total_after > 30:
            return -15
        if total_after > 25:
            return -10
        if total_after < 10:
            return 10
        return -5

    def job_compatibility(
        self,
        offer: JobOffer,
        events: list[Event],
        windows: list[AvailabilityWindow],
        range_start: date,
        range_end: date,
    ) -> JobCompatibility:
        """
        Estimate how well a job offer fits into the current schedule.

        Returns:
            Compatibility verdict with the five longest free slots
        """
        free_slots = self.availability_service.get_free_slots(
            windows, events, range_start, range_end
        )
        available_hours = sum(slot.duration_hours for slot in free_slots)
        required_hours = REQUIRED_WEEKLY_HOURS.get(offer.job_type, 10)

        score = 50
        reasons = []
        warnings = []

        if available_hours >= required_hours * 1.2:
            score += 30
            reasons.append(f"{available_hours:.1f}h available ({required_hours}h required)")
        elif available_hours >= required_hours:
            score += 15
            reasons.append("Just enough free time available")
            warnings.append("Tight schedule with little room to spare")
        else:
            score -= 20
            warnings.append(
                f"Not enough time: {available_hours:.1f}h available for {required_hours}h required"
            )

        if offer.shift == "flexible":
            score += 20
            reasons.append("Flexible hours, ideal for students")
        elif offer.shift == "night":
            score -= 15
            warnings.append("Night shifts will weigh on your studies")

        if offer.job_type in ("internship", "freelance"):
            score += 10
            reasons.append(f"{offer.job_type.capitalize()} positions fit well around studies")

        stats = compute_statistics(events, range_start, range_end, self.settings)
        balance_impact = self.estimate_balance_impact(stats.work_hours, required_hours)

        if score >= 80:
            recommendation = "Excellent opportunity: this offer fits your schedule well. Apply."
        elif score >= 60:
            recommendation = "Good fit: this offer is workable with your current schedule."
        elif score >= 40:
            recommendation = "Average fit: you may need to reorganize your schedule first."
        else:
            recommendation = "Poor fit: this offer would likely overload your schedule."

        compatible = score >= 50 and available_hours >= required_hours * 0.8
        logger.info("Job offer %s: compatibility %d (compatible=%s)", offer.id, score, compatible)

        return JobCompatibility(
            offer_id=offer.id,
            score=max(0, min(100, score)),
            compatible=compatible,
            message=(
                "You can take this offer"
                if compatible
                else "This offer risks overloading your schedule"
            ),
            available_hours=available_hours,
            required_hours=required_hours,
            balance_impact=balance_impact,
            recommendation=recommendation,
            best_slots=tuple(free_slots[:5]),
            reasons=tuple(reasons),
            warnings=tuple(warnings),
        )


def analyze(
    events: list[Event],
    windows: list[AvailabilityWindow],
    range_start: date,
    range_end: date,
    settings: Optional[AnalysisSettings] = None,
) -> AnalysisReport:
    """Analyze one schedule snapshot with a fresh engine."""
    return RoutineAnalyzer(settings).analyze(events, windows, range_start, range_end)
