"""Free time slots inside declared weekly availability."""

import logging
from datetime import date
from typing import Optional

from models.entities import AvailabilityWindow, Event, FreeSlot, weekday_of
from models.errors import RangeError
from services.analysis_config import DEFAULT_SETTINGS, AnalysisSettings
from services.time_arithmetic import END_OF_DAY, interval, to_clock, to_minutes

logger = logging.getLogger(__name__)


def merge_intervals(intervals: list[tuple[int, int]]) -> list[tuple[int, int]]:
    """Sort and merge overlapping or touching half-open intervals."""
    merged: list[tuple[int, int]] = []
    for start, end in sorted(intervals):
        if merged and start <= merged[-1][1]:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
        else:
            merged.append((start, end))
    return merged


def free_gaps(window: tuple[int, int], busy: list[tuple[int, int]]) -> list[tuple[int, int]]:
    """
    Gaps of a window left uncovered by busy intervals.

    Busy intervals are clipped to the window and merged first, so two
    overlapping events never split one gap with a false boundary.
    """
    win_start, win_end = window
    clipped = [
        (max(start, win_start), min(end, win_end))
        for start, end in busy
        if start < end and start < win_end and end > win_start
    ]

    gaps = []
    cursor = win_start
    for start, end in merge_intervals(clipped):
        if start > cursor:
            gaps.append((cursor, start))
        cursor = max(cursor, end)
    if cursor < win_end:
        gaps.append((cursor, win_end))
    return gaps


class AvailabilityService:
    """Computes usable free slots for each availability window."""

    def __init__(self, settings: AnalysisSettings = DEFAULT_SETTINGS):
        self.settings = settings

    def window_bounds(self, window: AvailabilityWindow) -> tuple[int, int]:
        """Window as minute offsets; a missing end means end of day."""
        start = to_minutes(window.start)
        end = to_minutes(window.end) if window.end else END_OF_DAY
        if end < start:
            raise RangeError(
                f"Availability window on {window.weekday} ends at {window.end} before it starts at {window.start}",
                start=window.start,
                end=window.end,
            )
        return start, end

    def busy_intervals(
        self,
        window: AvailabilityWindow,
        events: list[Event],
        range_start: Optional[date] = None,
        range_end: Optional[date] = None,
    ) -> list[tuple[int, int]]:
        """Intervals of events dated on the window's weekday within the range."""
        busy = []
        for event in events:
            if weekday_of(event.date) != window.weekday:
                continue
            if range_start and event.date < range_start:
                continue
            if range_end and event.date > range_end:
                continue
            busy.append(interval(event.start, event.end))
        return busy

    def free_slots_for_window(
        self,
        window: AvailabilityWindow,
        events: list[Event],
        range_start: Optional[date] = None,
        range_end: Optional[date] = None,
    ) -> list[FreeSlot]:
        """
        Free slots of one window, in chronological order.

        A window with no matching events is one slot whatever its length;
        otherwise gaps shorter than the minimum usable length are dropped.
        """
        bounds = self.window_bounds(window)
        busy = self.busy_intervals(window, events, range_start, range_end)
        gaps = free_gaps(bounds, busy) if busy else [bounds]
        min_minutes = self.settings.min_free_slot_minutes if busy else 0

        slots = []
        for start, end in gaps:
            if end - start < min_minutes:
                continue
            slots.append(FreeSlot(
                weekday=window.weekday,
                start=to_clock(start),
                end=to_clock(end),
                duration_minutes=end - start,
            ))
        return slots

    def get_free_slots(
        self,
        windows: list[AvailabilityWindow],
        events: list[Event],
        range_start: Optional[date] = None,
        range_end: Optional[date] = None,
    ) -> list[FreeSlot]:
        """
        Subtract busy events from every availability window.

        Events from several dates sharing a weekday all block the recurring
        window of that weekday.

        Args:
            windows: Declared weekly availability
            events: Scheduled events
            range_start: Ignore events dated before this day (if given)
            range_end: Ignore events dated after this day (if given)

        Returns:
            Free slots of at least the minimum usable length, longest first
        """
        free_slots = []
        for window in windows:
            free_slots.extend(self.free_slots_for_window(window, events, range_start, range_end))

        # Stable: ties keep window order, then chronological order
        free_slots.sort(key=lambda s: s.duration_minutes, reverse=True)
        logger.debug("%d free slot(s) across %d window(s)", len(free_slots), len(windows))
        return free_slots
