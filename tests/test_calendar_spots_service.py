"""
Tests for the CalendarSpotsService orchestration layer.
"""

import pendulum
import pytest

from calendarspots.adapters.memory_repository import InMemoryCalendarRepository
from calendarspots.domain.exceptions import CalendarNotFoundError, InvalidArgumentError
from calendarspots.services.calendar_spots import CalendarSpotsService

DOCUMENT = {
    "durationBefore": 10,
    "durationAfter": 5,
    "slots": {
        "10-04-2023": [
            {"start": "09:00", "end": "10:00"},
            {"start": "11:00", "end": "12:00"},
        ]
    },
    "sessions": {"10-04-2023": [{"start": "11:00", "end": "12:00"}]},
}


class CountingRepository(InMemoryCalendarRepository):
    """Memory store that records every load."""

    def __init__(self, documents):
        super().__init__(documents)
        self.calls = []

    def load(self, calendar_id):
        self.calls.append(calendar_id)
        return super().load(calendar_id)


def _build_service(**kwargs) -> CalendarSpotsService:
    return CalendarSpotsService(repository=InMemoryCalendarRepository({"1": DOCUMENT}), **kwargs)


def test_get_available_spots_uses_calendar_data():
    """End-to-end call should yield the computed slots."""
    service = _build_service()

    result = service.get_available_spots("1", "10-04-2023", 30)

    assert len(result) == 1
    assert result[0].start_hour == pendulum.datetime(2023, 4, 10, 9, 0, tz="UTC")
    assert result[0].client_start_hour == pendulum.datetime(2023, 4, 10, 9, 10, tz="UTC")
    assert result[0].end_hour == pendulum.datetime(2023, 4, 10, 9, 45, tz="UTC")


def test_calendar_is_loaded_once():
    """Repeated queries reuse the loaded configuration."""
    repository = CountingRepository({"1": DOCUMENT})
    service = CalendarSpotsService(repository=repository)

    service.get_available_spots("1", "10-04-2023", 30)
    service.get_available_spots(1, "11-04-2023", 15)

    assert repository.calls == ["1"]
    assert service.finder_for("1") is service.finder_for(1)


def test_timezone_is_passed_to_finder():
    service = _build_service(timezone="+02:00")

    result = service.get_available_spots("1", "10-04-2023", 30)

    assert result[0].start_hour == pendulum.datetime(2023, 4, 10, 7, 0, tz="UTC")


def test_unknown_calendar_propagates():
    service = _build_service()

    with pytest.raises(CalendarNotFoundError):
        service.get_available_spots("2", "10-04-2023", 30)


def test_invalid_arguments_propagate():
    service = _build_service()

    with pytest.raises(InvalidArgumentError):
        service.get_available_spots("1", "31-02-2023", 30)
