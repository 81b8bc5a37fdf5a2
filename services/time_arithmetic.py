"""Wall-clock arithmetic on "HH:MM" strings."""

import re

from models.errors import FormatError

MINUTES_PER_DAY = 24 * 60
END_OF_DAY = MINUTES_PER_DAY - 1  # 23:59

_CLOCK_PATTERN = re.compile(r"([01][0-9]|2[0-3]):([0-5][0-9])")


def to_minutes(clock: str) -> int:
    """Convert "HH:MM" to minutes since midnight (0-1439)."""
    match = _CLOCK_PATTERN.fullmatch(clock) if isinstance(clock, str) else None
    if not match:
        raise FormatError(str(clock))
    return int(match.group(1)) * 60 + int(match.group(2))


def to_clock(minutes: int) -> str:
    """Convert minutes since midnight back to "HH:MM"."""
    if not 0 <= minutes < MINUTES_PER_DAY:
        raise FormatError(str(minutes), expected="minute offset in [0, 1439]")
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def duration_minutes(start: str, end: str) -> int:
    """Length of [start, end) in minutes; a reversed interval counts as zero."""
    return max(0, to_minutes(end) - to_minutes(start))


def interval(start: str, end: str) -> tuple[int, int]:
    """Half-open minute interval, with a reversed end clamped onto the start."""
    start_min = to_minutes(start)
    return start_min, max(start_min, to_minutes(end))
