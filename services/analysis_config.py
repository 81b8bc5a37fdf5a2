"""Tunable thresholds for the routine analysis engine."""

import os
from dataclasses import dataclass, fields
from typing import Optional

from dotenv import load_dotenv

ENV_PREFIX = "ROUTINE_"


@dataclass(frozen=True)
class AnalysisSettings:
    """
    Thresholds used by the detectors and the balance scorer.

    Every field can be overridden with an environment variable named
    ``ROUTINE_<FIELD_NAME_IN_UPPER_CASE>``, e.g. ``ROUTINE_OVERLOAD_HOURS=9``.
    """
    overload_hours: float = 10.0
    high_overload_hours: float = 12.0
    critical_overload_hours: float = 14.0
    rest_critical_pct: float = 20.0
    rest_low_pct: float = 30.0
    rest_fair_pct: float = 35.0
    rest_optimal_max_pct: float = 45.0
    min_free_slot_minutes: int = 30
    waking_hours_per_day: float = 16.0
    activity_bonus_hours: float = 5.0
    busy_day_hours: float = 12.0  # quick-suggestion warning threshold

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "AnalysisSettings":
        """Build settings from defaults overridden by ROUTINE_* environment variables."""
        load_dotenv(dotenv_path)

        overrides = {}
        for f in fields(cls):
            env_name = f"{ENV_PREFIX}{f.name.upper()}"
            raw = os.getenv(env_name)
            if raw is None or raw.strip() == "":
                continue
            caster = int if f.type in (int, "int") else float
            try:
                overrides[f.name] = caster(raw.strip())
            except ValueError:
                raise ValueError(f"Invalid value for {env_name}: {raw!r}")
        return cls(**overrides)


DEFAULT_SETTINGS = AnalysisSettings()
