"""Balance score and health summary of a schedule."""

from models.entities import (
    BalanceScoreBreakdown,
    Conflict,
    HealthSummary,
    HealthStatus,
    OverloadedDay,
    TimeStatistics,
)
from services.analysis_config import DEFAULT_SETTINGS, AnalysisSettings

BASE_SCORE = 100
OVERLOAD_PENALTY = {"critical": -15, "high": -10, "moderate": -5}

HEALTHY_RATIO = (0.6, 1.2)
OVERWORK_RATIO = 2.0
UNDERWORK_RATIO = 0.3


class BalanceScorer:
    """Combines time allocation, conflicts and overload into one score."""

    def __init__(self, settings: AnalysisSettings = DEFAULT_SETTINGS):
        self.settings = settings

    def work_study_adjustment(self, stats: TimeStatistics) -> int:
        ratio = stats.work_study_ratio
        if HEALTHY_RATIO[0] <= ratio <= HEALTHY_RATIO[1]:
            return 10
        if ratio > OVERWORK_RATIO:
            return -15
        if ratio < UNDERWORK_RATIO:
            return -10
        return 0

    def rest_adjustment(self, stats: TimeStatistics) -> int:
        rest = stats.rest_percentage
        s = self.settings
        if rest < s.rest_critical_pct:
            return -30
        if rest < s.rest_low_pct:
            return -20
        if rest < s.rest_fair_pct:
            return -10
        return 0

    def has_optimal_rest(self, stats: TimeStatistics) -> bool:
        return self.settings.rest_fair_pct <= stats.rest_percentage <= self.settings.rest_optimal_max_pct

    def score(
        self,
        stats: TimeStatistics,
        conflicts: list[Conflict],
        overloaded_days: list[OverloadedDay],
    ) -> BalanceScoreBreakdown:
        """
        Score a schedule.

        The breakdown is returned unclamped; use ``final_score`` for the
        bounded [0, 100] value.
        """
        bonuses = 0
        if self.has_optimal_rest(stats):
            bonuses += 10
        if stats.activity_hours >= self.settings.activity_bonus_hours:
            bonuses += 5
        if not conflicts:
            bonuses += 10

        return BalanceScoreBreakdown(
            base_score=BASE_SCORE,
            work_study_adjustment=self.work_study_adjustment(stats),
            rest_adjustment=self.rest_adjustment(stats),
            conflict_penalty=sum(c.score_impact for c in conflicts),
            overload_penalty=sum(OVERLOAD_PENALTY[d.level] for d in overloaded_days),
            bonuses=bonuses,
        )

    def health_summary(
        self,
        score: int,
        stats: TimeStatistics,
        conflicts: list[Conflict],
        overloaded_days: list[OverloadedDay],
    ) -> HealthSummary:
        """Status label plus the main issues and strengths behind a score."""
        status: HealthStatus
        if score >= 85:
            status = "excellent"
        elif score >= 70:
            status = "good"
        elif score >= 50:
            status = "fair"
        elif score >= 30:
            status = "poor"
        else:
            status = "critical"

        ratio = stats.work_study_ratio
        issues = []
        strengths = []

        if conflicts:
            issues.append(f"{len(conflicts)} schedule conflict(s) to resolve")
        if overloaded_days:
            issues.append(f"{len(overloaded_days)} overloaded day(s)")
        if stats.rest_percentage < self.settings.rest_low_pct:
            issues.append("Not enough rest time")
        if ratio > OVERWORK_RATIO:
            issues.append("Imbalance: too much work compared to study")
        elif ratio < UNDERWORK_RATIO:
            issues.append("Little professional experience")

        if not conflicts:
            strengths.append("No schedule conflicts")
        if self.has_optimal_rest(stats):
            strengths.append("Excellent rest balance")
        if HEALTHY_RATIO[0] <= ratio <= HEALTHY_RATIO[1]:
            strengths.append("Good work/study balance")
        if stats.activity_hours >= self.settings.activity_bonus_hours:
            strengths.append("Time for personal activities")
        if not overloaded_days:
            strengths.append("Evenly spread activities")

        return HealthSummary(
            status=status,
            main_issues=tuple(issues) or ("No major issue detected",),
            main_strengths=tuple(strengths) or ("Keep up the effort",),
        )
