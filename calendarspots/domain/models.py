"""
Domain models for bookable slots, calendar configuration and computed results.
"""

import re
from dataclasses import dataclass, field
from datetime import time
from typing import Dict, List, Mapping, Tuple

import pendulum
from pendulum import Date, DateTime, FixedTimezone

DATE_FORMAT = "DD-MM-YYYY"
FIXED_OFFSET_PATTERN = re.compile(r"^(?P<sign>[+-])(?P<hours>\d{2}):(?P<minutes>\d{2})$")


def minutes_of_day(value: time) -> int:
    """Return the number of minutes elapsed since midnight."""
    return value.hour * 60 + value.minute


@dataclass(frozen=True)
class TimeSlot:
    """
    A wall-clock window within a single day.

    Used both for bookable slots and for already booked sessions.
    Assumes start < end; the calendar document is trusted on that point.
    """
    start: time
    end: time

    @classmethod
    def parse(cls, start: str, end: str) -> "TimeSlot":
        """Build a slot from two ``HH:mm`` strings."""
        return cls(start=parse_clock_time(start), end=parse_clock_time(end))

    def duration_minutes(self) -> int:
        """Return the local span of the slot in minutes."""
        return minutes_of_day(self.end) - minutes_of_day(self.start)

    def conflicts_with(self, session: "TimeSlot") -> bool:
        """
        Check whether a booked session makes this slot unavailable.

        A slot conflicts when it matches the session exactly, when one of
        its edges falls strictly inside the session, or when it strictly
        contains the session. Touching edges never conflict.
        """
        if self.start == session.start and self.end == session.end:
            return True
        if session.start < self.start < session.end:
            return True
        if session.start < self.end < session.end:
            return True
        return self.start < session.start and self.end > session.end

    def format(self) -> str:
        return f"{self.start.strftime('%H:%M')} - {self.end.strftime('%H:%M')}"

    def __str__(self) -> str:
        return self.format()


def _parse_exact(value: str, fmt: str) -> DateTime:
    # pendulum tokens accept single digits; formatting back rejects those
    if not isinstance(value, str):
        raise ValueError(f"Expected {fmt} text, got {value!r}")
    parsed = pendulum.from_format(value, fmt)
    if parsed.format(fmt) != value:
        raise ValueError(f"'{value}' does not match {fmt}")
    return parsed


def parse_clock_time(value: str) -> time:
    """
    Parse ``HH:mm`` text into a time of day.

    Raises:
        ValueError: If the text is not a valid ``HH:mm`` time
    """
    parsed = _parse_exact(value, "HH:mm")
    return time(hour=parsed.hour, minute=parsed.minute)


def parse_date_key(value: str) -> Date:
    """
    Parse a ``DD-MM-YYYY`` date key.

    Raises:
        ValueError: If the text is not a valid calendar date in that format
    """
    day = _parse_exact(value, DATE_FORMAT).date()
    # pendulum renders years below 1000 without padding
    if f"{day.day:02d}-{day.month:02d}-{day.year:04d}" != value:
        raise ValueError(f"'{value}' does not match {DATE_FORMAT}")
    return day


def fixed_offset_timezone(value: str) -> FixedTimezone:
    """
    Resolve ``UTC`` or a ``+HH:MM`` / ``-HH:MM`` offset.

    Zone names with daylight saving rules are rejected: slots are anchored
    at one constant offset.

    Raises:
        ValueError: If the value is not UTC or a fixed offset
    """
    if not isinstance(value, str):
        raise ValueError(f"Expected UTC or +HH:MM, got {value!r}")
    if value.upper() == "UTC":
        return pendulum.UTC

    match = FIXED_OFFSET_PATTERN.match(value)
    if match is None:
        raise ValueError(f"Expected UTC or a fixed offset like +02:00, got '{value}'")

    hours, minutes = int(match.group("hours")), int(match.group("minutes"))
    if hours > 14 or minutes > 59:
        raise ValueError(f"Offset out of range: {value}")
    seconds = hours * 3600 + minutes * 60
    return pendulum.fixed_timezone(-seconds if match.group("sign") == "-" else seconds)


@dataclass(frozen=True)
class CalendarConfig:
    """
    Immutable per-calendar settings.

    ``slots`` and ``sessions`` are keyed by the ``DD-MM-YYYY`` date key.
    """
    duration_before: int = 0
    duration_after: int = 0
    slots: Mapping[str, Tuple[TimeSlot, ...]] = field(default_factory=dict)
    sessions: Mapping[str, Tuple[TimeSlot, ...]] = field(default_factory=dict)

    def slots_for(self, date_key: str) -> Tuple[TimeSlot, ...]:
        """Bookable slots of a day, empty if the day is not configured."""
        return tuple(self.slots.get(date_key, ()))

    def sessions_for(self, date_key: str) -> Tuple[TimeSlot, ...]:
        """Booked sessions of a day, empty if nothing is booked."""
        return tuple(self.sessions.get(date_key, ()))

    def days(self) -> List[str]:
        """Every date key that has slots or sessions, in calendar order."""
        keys = set(self.slots) | set(self.sessions)
        return sorted(keys, key=parse_date_key)


@dataclass(frozen=True)
class AvailableSlot:
    """
    A bookable slot anchored to an absolute date.

    ``start_hour``/``end_hour`` cover the provider's occupied window
    including both buffers; the ``client_*`` pair covers the billable session.
    """
    start_hour: DateTime
    end_hour: DateTime
    client_start_hour: DateTime
    client_end_hour: DateTime

    def to_dict(self) -> Dict[str, str]:
        """Serialise to the camelCase shape used by API consumers."""
        return {
            "startHour": self.start_hour.to_iso8601_string(),
            "endHour": self.end_hour.to_iso8601_string(),
            "clientStartHour": self.client_start_hour.to_iso8601_string(),
            "clientEndHour": self.client_end_hour.to_iso8601_string(),
        }

    def format_display(self) -> str:
        """
        Format the slot for display.
        Format: Weekday, DD.MM.YYYY | HH:mm – HH:mm (client HH:mm – HH:mm)
        """
        start = self.start_hour
        date_str = start.format("dddd, DD.MM.YYYY")
        provider = f"{start.format('HH:mm')} – {self.end_hour.format('HH:mm')}"
        client = (
            f"{self.client_start_hour.format('HH:mm')} – "
            f"{self.client_end_hour.format('HH:mm')}"
        )
        return f"{date_str} | {provider} (client {client})"
