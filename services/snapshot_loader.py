"""Maps raw schedule payloads (JSON dicts) to domain entities."""

import json
from datetime import date
from typing import Any, Dict, List, Optional, Union

from models.entities import AvailabilityWindow, Event, EventCategory, JobOffer, Weekday, WEEKDAYS
from models.errors import FormatError

CATEGORY_ALIASES: Dict[str, EventCategory] = {
    "class": "class",
    "cours": "class",
    "course": "class",
    "paid-work": "paid-work",
    "job": "paid-work",
    "work": "paid-work",
    "travail": "paid-work",
    "deadline": "deadline",
    "exam": "deadline",
    "examen": "deadline",
}

WEEKDAY_ALIASES: Dict[str, Weekday] = {
    "lundi": "monday",
    "mardi": "tuesday",
    "mercredi": "wednesday",
    "jeudi": "thursday",
    "vendredi": "friday",
    "samedi": "saturday",
    "dimanche": "sunday",
}

JOB_TYPE_ALIASES = {"job": "job", "stage": "internship", "internship": "internship", "freelance": "freelance"}
SHIFT_ALIASES = {"flexible": "flexible", "nuit": "night", "night": "night", "jour": "day", "day": "day"}


class SnapshotLoader:
    """
    Builds events and availability windows from loosely-shaped dicts.

    Accepts both the English field names and the French ones used by the
    mobile client (titre, heureDebut, heureFin, jour, ...).
    """

    def _get_field(self, data: Dict[str, Any], *keys: str, default: str = "") -> str:
        """Helper to get value with multiple field name variations."""
        for key in keys:
            value = data.get(key, "")
            if value:
                return str(value).strip()
        return default

    def _require(self, data: Dict[str, Any], *keys: str) -> str:
        value = self._get_field(data, *keys)
        if not value:
            raise FormatError(repr(data), expected=f"a non-empty '{keys[0]}' field")
        return value

    def parse_date(self, value: str) -> date:
        try:
            return date.fromisoformat(value[:10])
        except ValueError:
            raise FormatError(value, expected="YYYY-MM-DD")

    def parse_category(self, value: str) -> EventCategory:
        return CATEGORY_ALIASES.get(value.strip().lower(), "other")

    def parse_weekday(self, value: str) -> Weekday:
        key = value.strip().lower()
        if key in WEEKDAYS:
            return key
        if key in WEEKDAY_ALIASES:
            return WEEKDAY_ALIASES[key]
        raise FormatError(value, expected="a weekday name")

    def load_event(self, data: Dict[str, Any]) -> Event:
        """Map one raw event dict to an Event."""
        return Event(
            id=self._require(data, "id", "_id"),
            title=self._get_field(data, "title", "titre", default="Untitled"),
            category=self.parse_category(self._get_field(data, "category", "type", default="other")),
            date=self.parse_date(self._require(data, "date")),
            start=self._require(data, "start", "heureDebut", "start_time"),
            end=self._require(data, "end", "heureFin", "end_time"),
            location=self._get_field(data, "location", "lieu") or None,
        )

    def load_window(self, data: Dict[str, Any]) -> AvailabilityWindow:
        """Map one raw availability dict to an AvailabilityWindow."""
        return AvailabilityWindow(
            weekday=self.parse_weekday(self._require(data, "weekday", "jour", "day")),
            start=self._require(data, "start", "heureDebut", "start_time"),
            end=self._get_field(data, "end", "heureFin", "end_time") or None,
            id=self._get_field(data, "id", "_id") or None,
        )

    def load_job_offer(self, data: Dict[str, Any]) -> JobOffer:
        job_type = self._get_field(data, "job_type", "jobType", default="job").lower()
        shift = self._get_field(data, "shift", default="day").lower()
        return JobOffer(
            id=self._require(data, "id", "_id"),
            title=self._get_field(data, "title", "titre", default="Untitled"),
            job_type=JOB_TYPE_ALIASES.get(job_type, "job"),
            shift=SHIFT_ALIASES.get(shift, "day"),
        )

    def read_json(self, raw: Union[bytes, str]) -> Optional[Dict[str, Any]]:
        """
        Parse snapshot text or UTF-8 bytes; blank input gives None.

        Raises:
            UnicodeDecodeError: If bytes are not UTF-8
            json.JSONDecodeError: If the text is not JSON
        """
        text = raw.decode("utf-8") if isinstance(raw, bytes) else raw
        if not text.strip():
            return None
        return json.loads(text)

    def load_snapshot(
        self, payload: Dict[str, Any]
    ) -> tuple[List[Event], List[AvailabilityWindow], Optional[date], Optional[date]]:
        """
        Map a whole analysis payload.

        Returns:
            (events, windows, range_start, range_end); range bounds are None
            when the payload omits them
        """
        events = [self.load_event(e) for e in payload.get("events", payload.get("evenements", []))]
        windows = [
            self.load_window(w)
            for w in payload.get("availability", payload.get("disponibilites", []))
        ]

        range_start = self._get_field(payload, "range_start", "dateDebut")
        range_end = self._get_field(payload, "range_end", "dateFin")

        return (
            events,
            windows,
            self.parse_date(range_start) if range_start else None,
            self.parse_date(range_end) if range_end else None,
        )
