from datetime import date

import pytest

from models.errors import RangeError
from services.analysis_config import AnalysisSettings
from services.time_statistics import compute_statistics, count_days

MONDAY = date(2024, 1, 15)
SUNDAY = date(2024, 1, 21)


class TestComputeStatistics:
    def test_attributes_hours_by_category(self, make_event):
        events = [
            make_event("08:00", "12:00", category="paid-work"),
            make_event("09:00", "15:00", day=date(2024, 1, 16), category="class"),
            make_event("14:00", "16:00", day=date(2024, 1, 17), category="deadline"),
            make_event("18:00", "21:00", day=SUNDAY, category="other"),
            make_event("08:00", "18:00", day=date(2024, 1, 22), category="paid-work"),
        ]

        stats = compute_statistics(events, MONDAY, SUNDAY)

        assert stats.work_hours == 5
        assert stats.study_hours == 7
        assert stats.activity_hours == 3
        assert stats.rest_hours == 16 * 7 - 15
        assert stats.total_hours == 112
        assert stats.rest_percentage == pytest.approx(97 / 112 * 100)
        assert stats.work_percentage + stats.study_percentage + stats.rest_percentage + \
            stats.activity_percentage == pytest.approx(100)

    def test_single_day_range(self, make_event):
        stats = compute_statistics([make_event("09:00", "10:00")], MONDAY, MONDAY)
        assert stats.rest_hours == 15

    def test_rest_never_negative(self, make_event):
        settings = AnalysisSettings(waking_hours_per_day=2)
        stats = compute_statistics([make_event("06:00", "22:00")], MONDAY, MONDAY, settings)

        assert stats.rest_hours == 0
        assert stats.study_percentage == 100

    def test_empty_schedule_is_all_rest(self):
        stats = compute_statistics([], MONDAY, SUNDAY)
        assert stats.rest_percentage == 100
        assert stats.work_study_ratio == 0

    def test_reversed_range_rejected(self):
        with pytest.raises(RangeError) as excinfo:
            compute_statistics([], SUNDAY, MONDAY)
        assert excinfo.value.start == SUNDAY


def test_count_days_is_inclusive():
    assert count_days(MONDAY, SUNDAY) == 7
