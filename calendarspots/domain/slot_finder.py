"""
Core business logic for finding bookable slots.

Pure domain logic: no file access, no network. Overlap and duration checks
work on local wall-clock times; only the surviving slots are anchored to an
absolute timestamp.
"""

import logging
from typing import List, Sequence

import pendulum
from pendulum import Date

from .exceptions import InvalidArgumentError
from .models import (
    DATE_FORMAT,
    AvailableSlot,
    CalendarConfig,
    TimeSlot,
    fixed_offset_timezone,
    parse_date_key,
)

logger = logging.getLogger(__name__)


class SlotFinder:
    """
    Finds the slots of a calendar that can still host a session.

    Algorithm:
    1. Validate the query and look up the day's slots and sessions
    2. Drop every slot that conflicts with a booked session
    3. Drop every slot shorter than the session plus both buffers
    4. Anchor the remaining slots to the queried date
    """

    def __init__(self, calendar: CalendarConfig, timezone: str = "UTC"):
        """
        Args:
            calendar: Loaded calendar configuration
            timezone: ``UTC`` or a fixed ``+HH:MM`` offset used to anchor slots

        Raises:
            ValueError: If the timezone is not a fixed offset
        """
        self.calendar = calendar
        self.timezone = fixed_offset_timezone(timezone)

    def get_available_spots(self, date: str, duration_in_min: int) -> List[AvailableSlot]:
        """
        Find all available slots of a day.

        Args:
            date: Day to search, as ``DD-MM-YYYY``
            duration_in_min: Billable session length in minutes

        Returns:
            AvailableSlot objects in the order the calendar lists its slots

        Raises:
            InvalidArgumentError: If the date is malformed or the duration
                is not a positive integer
        """
        day = self._parse_date(date)
        self._validate_duration(duration_in_min)

        slots_of_day = self.calendar.slots_for(date)
        if not slots_of_day:
            return []

        sessions_of_day = self.calendar.sessions_for(date)
        total_duration = (
            duration_in_min
            + self.calendar.duration_before
            + self.calendar.duration_after
        )

        available = [
            slot for slot in slots_of_day
            if self._is_slot_available(slot, sessions_of_day)
            and self._is_slot_long_enough(slot, total_duration)
        ]

        logger.debug(
            "%s: %d of %d slots available for %d minutes (%d with buffers)",
            date,
            len(available),
            len(slots_of_day),
            duration_in_min,
            total_duration,
        )

        return [
            self._create_available_slot(slot, day, duration_in_min)
            for slot in available
        ]

    @staticmethod
    def _parse_date(date: str) -> Date:
        """Strictly parse a ``DD-MM-YYYY`` date."""
        try:
            return parse_date_key(date)
        except ValueError as exc:
            raise InvalidArgumentError(
                f"Invalid date {date!r}, expected {DATE_FORMAT}"
            ) from exc

    @staticmethod
    def _validate_duration(duration_in_min: int) -> None:
        if isinstance(duration_in_min, bool) or not isinstance(duration_in_min, int):
            raise InvalidArgumentError(
                f"Duration must be an integer number of minutes, got {duration_in_min!r}"
            )
        if duration_in_min <= 0:
            raise InvalidArgumentError("Duration must be greater than zero")

    @staticmethod
    def _is_slot_available(slot: TimeSlot, sessions: Sequence[TimeSlot]) -> bool:
        for session in sessions:
            if slot.conflicts_with(session):
                logger.debug("Slot %s conflicts with session %s", slot, session)
                return False
        return True

    @staticmethod
    def _is_slot_long_enough(slot: TimeSlot, required_minutes: int) -> bool:
        if slot.duration_minutes() < required_minutes:
            logger.debug(
                "Slot %s is too short (%d < %d minutes)",
                slot,
                slot.duration_minutes(),
                required_minutes,
            )
            return False
        return True

    def _create_available_slot(
        self,
        slot: TimeSlot,
        day: Date,
        duration_in_min: int
    ) -> AvailableSlot:
        """Anchor a local slot to the queried day and derive its timestamps."""
        start_hour = pendulum.datetime(
            day.year,
            day.month,
            day.day,
            slot.start.hour,
            slot.start.minute,
            tz=self.timezone,
        )
        client_start_hour = start_hour.add(minutes=self.calendar.duration_before)
        client_end_hour = client_start_hour.add(minutes=duration_in_min)
        end_hour = client_end_hour.add(minutes=self.calendar.duration_after)

        return AvailableSlot(
            start_hour=start_hour,
            end_hour=end_hour,
            client_start_hour=client_start_hour,
            client_end_hour=client_end_hour,
        )
