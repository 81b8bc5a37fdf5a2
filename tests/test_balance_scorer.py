from datetime import date

import pytest

from models.entities import Conflict, OverloadedDay
from services.balance_scorer import BalanceScorer

MONDAY = date(2024, 1, 15)


def _conflict(make_event, impact, severity="medium"):
    a = make_event("09:00", "10:00")
    b = make_event("09:30", "10:30")
    return Conflict(
        date=MONDAY, event_a=a, event_b=b, overlap_minutes=30,
        severity=severity, suggestion="", score_impact=impact,
    )


def _overloaded(level):
    return OverloadedDay(
        date=MONDAY, weekday="monday", total_minutes=600,
        events=(), level=level, recommendations=(),
    )


class TestBalanceScorer:
    def setup_method(self):
        self.scorer = BalanceScorer()

    def test_healthy_schedule_is_clamped_to_100(self, make_stats):
        breakdown = self.scorer.score(make_stats(work=30, study=30, rest_pct=38), [], [])

        assert breakdown.base_score == 100
        assert breakdown.work_study_adjustment == 10
        assert breakdown.rest_adjustment == 0
        assert breakdown.conflict_penalty == 0
        assert breakdown.overload_penalty == 0
        assert breakdown.bonuses == 20
        assert breakdown.raw_total == 130
        assert breakdown.final_score == 100

    @pytest.mark.parametrize("work,study,expected", [
        (6, 10, 10),
        (12, 10, 10),
        (21, 10, -15),
        (2, 10, -10),
        (15, 10, 0),
        (2, 0, 0),
        (3, 0, -15),
    ])
    def test_work_study_ratio(self, make_stats, work, study, expected):
        assert self.scorer.work_study_adjustment(make_stats(work=work, study=study)) == expected

    @pytest.mark.parametrize("rest_pct,expected", [
        (10, -30),
        (25, -20),
        (34.9, -10),
        (35, 0),
        (45, 0),
        (60, 0),
    ])
    def test_rest_adjustment(self, make_stats, rest_pct, expected):
        assert self.scorer.rest_adjustment(make_stats(rest_pct=rest_pct)) == expected

    def test_penalties_and_bonuses(self, make_event, make_stats):
        breakdown = self.scorer.score(
            make_stats(work=10, study=10, activity=6, rest_pct=40),
            [_conflict(make_event, -5), _conflict(make_event, -30, "critical")],
            [_overloaded("critical"), _overloaded("high"), _overloaded("moderate")],
        )

        assert breakdown.conflict_penalty == -35
        assert breakdown.overload_penalty == -30
        assert breakdown.rest_adjustment == 0
        assert breakdown.bonuses == 15
        assert breakdown.raw_total == 100 + 10 - 35 - 30 + 15

    def test_pathological_input_clamped_to_zero(self, make_event, make_stats):
        conflicts = [_conflict(make_event, -45, "critical") for _ in range(50)]
        breakdown = self.scorer.score(make_stats(work=80, study=1, rest_pct=5), conflicts, [])

        assert breakdown.raw_total < 0
        assert breakdown.final_score == 0


class TestHealthSummary:
    def setup_method(self):
        self.scorer = BalanceScorer()

    @pytest.mark.parametrize("score,status", [
        (100, "excellent"), (85, "excellent"), (70, "good"), (50, "fair"), (30, "poor"), (29, "critical"),
    ])
    def test_status_from_score(self, make_stats, score, status):
        assert self.scorer.health_summary(score, make_stats(rest_pct=40), [], []).status == status

    def test_lists_issues(self, make_event, make_stats):
        summary = self.scorer.health_summary(
            20,
            make_stats(work=30, study=5, rest_pct=10),
            [_conflict(make_event, -5)],
            [_overloaded("high")],
        )

        assert summary.main_issues == (
            "1 schedule conflict(s) to resolve",
            "1 overloaded day(s)",
            "Not enough rest time",
            "Imbalance: too much work compared to study",
        )
        assert summary.main_strengths == ("Keep up the effort",)

    def test_lists_strengths(self, make_stats):
        summary = self.scorer.health_summary(
            100, make_stats(work=10, study=10, activity=5, rest_pct=40), [], []
        )

        assert summary.main_issues == ("No major issue detected",)
        assert "No schedule conflicts" in summary.main_strengths
        assert "Good work/study balance" in summary.main_strengths
        assert "Time for personal activities" in summary.main_strengths
        assert len(summary.main_strengths) == 5


class TestRestBonus:
    def setup_method(self):
        self.scorer = BalanceScorer()

    @pytest.mark.parametrize("rest_pct,bonus", [(34.9, 0), (35, 10), (40, 10), (45, 10), (45.1, 0)])
    def test_optimal_rest_counts_as_bonus(self, make_event, make_stats, rest_pct, bonus):
        stats = make_stats(work=10, study=10, rest_pct=rest_pct)

        breakdown = self.scorer.score(stats, [_conflict(make_event, -5)], [])

        assert breakdown.bonuses == bonus
        assert breakdown.rest_adjustment == (-10 if rest_pct < 35 else 0)
