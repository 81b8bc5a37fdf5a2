"""Domain models for the Routine Analyzer."""

from dataclasses import asdict, dataclass, field
from datetime import date
from typing import Literal, Optional

EventCategory = Literal["class", "paid-work", "deadline", "other"]
Weekday = Literal["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]
ConflictSeverity = Literal["low", "medium", "high", "critical"]
OverloadLevel = Literal["moderate", "high", "critical"]
HealthStatus = Literal["excellent", "good", "fair", "poor", "critical"]

WEEKDAYS: tuple[Weekday, ...] = (
    "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"
)
SEVERITY_ORDER: tuple[ConflictSeverity, ...] = ("low", "medium", "high", "critical")


def weekday_of(day: date) -> Weekday:
    """Locale-independent weekday name of a calendar date."""
    return WEEKDAYS[day.weekday()]


def _dict_factory(items: list[tuple[str, object]]) -> dict:
    return {key: value.isoformat() if isinstance(value, date) else value for key, value in items}


@dataclass(frozen=True)
class Event:
    """A scheduled occurrence (busy slot) on one calendar date."""
    id: str
    title: str
    category: EventCategory
    date: date
    start: str  # "HH:MM"
    end: str  # "HH:MM"
    location: Optional[str] = None


@dataclass(frozen=True)
class AvailabilityWindow:
    """A recurring weekly declaration of when the user is nominally free."""
    weekday: Weekday
    start: str
    end: Optional[str] = None  # None means end of day
    id: Optional[str] = None


@dataclass(frozen=True)
class Conflict:
    """Two events on the same date whose time intervals intersect."""
    date: date
    event_a: Event
    event_b: Event
    overlap_minutes: int
    severity: ConflictSeverity
    suggestion: str
    score_impact: int


@dataclass(frozen=True)
class OverloadedDay:
    """A date whose total busy time reaches the overload threshold."""
    date: date
    weekday: Weekday
    total_minutes: int
    events: tuple[Event, ...]
    level: OverloadLevel
    recommendations: tuple[str, ...]

    @property
    def total_hours(self) -> float:
        return self.total_minutes / 60


@dataclass(frozen=True)
class FreeSlot:
    """A usable free interval inside an availability window."""
    weekday: Weekday
    start: str
    end: str
    duration_minutes: int

    @property
    def duration_hours(self) -> float:
        return self.duration_minutes / 60


@dataclass(frozen=True)
class TimeStatistics:
    """Hours and percentages spent per activity kind over the analysis range."""
    work_hours: float
    study_hours: float
    rest_hours: float
    activity_hours: float
    total_hours: float
    work_percentage: float
    study_percentage: float
    rest_percentage: float
    activity_percentage: float

    @property
    def work_study_ratio(self) -> float:
        return self.work_hours / max(self.study_hours, 1)


@dataclass(frozen=True)
class BalanceScoreBreakdown:
    """Additive components of the balance score, before clamping."""
    base_score: int
    work_study_adjustment: int
    rest_adjustment: int
    conflict_penalty: int
    overload_penalty: int
    bonuses: int

    @property
    def raw_total(self) -> int:
        return (
            self.base_score
            + self.work_study_adjustment
            + self.rest_adjustment
            + self.conflict_penalty
            + self.overload_penalty
            + self.bonuses
        )

    @property
    def final_score(self) -> int:
        return max(0, min(100, round(self.raw_total)))


@dataclass(frozen=True)
class HealthSummary:
    status: HealthStatus
    main_issues: tuple[str, ...]
    main_strengths: tuple[str, ...]


@dataclass(frozen=True)
class AnalysisReport:
    """Complete result of one routine analysis."""
    range_start: date
    range_end: date
    score: int
    breakdown: BalanceScoreBreakdown
    statistics: TimeStatistics
    conflicts: tuple[Conflict, ...]
    overloaded_days: tuple[OverloadedDay, ...]
    free_slots: tuple[FreeSlot, ...]
    health_summary: HealthSummary

    def to_dict(self) -> dict:
        """Plain-data view of the report (dates as ISO strings)."""
        result = asdict(self, dict_factory=_dict_factory)
        result["breakdown"]["raw_total"] = self.breakdown.raw_total
        for raw, day in zip(result["overloaded_days"], self.overloaded_days):
            raw["total_hours"] = day.total_hours
        for raw, slot in zip(result["free_slots"], self.free_slots):
            raw["duration_hours"] = slot.duration_hours
        return result


@dataclass(frozen=True)
class QuickSuggestion:
    """Verdict on adding one prospective event to an existing schedule."""
    status: Literal["ok", "warning", "error"]
    message: str
    impact_score: int
    conflicts: tuple[Conflict, ...] = ()
    recommendations: tuple[str, ...] = ()


@dataclass(frozen=True)
class JobOffer:
    """The scheduling-relevant part of a job offer."""
    id: str
    title: str
    job_type: Literal["job", "internship", "freelance"]
    shift: Literal["flexible", "night", "day"] = "day"


@dataclass(frozen=True)
class JobCompatibility:
    """How well a job offer fits into the current schedule."""
    offer_id: str
    score: int
    compatible: bool
    message: str
    available_hours: float
    required_hours: int
    balance_impact: int
    recommendation: str
    best_slots: tuple[FreeSlot, ...] = ()
    reasons: tuple[str, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)
