"""
Shared fixtures.
"""

from pathlib import Path

import pytest

from calendarspots.adapters.json_repository import JsonCalendarRepository

CALENDARS_DIR = Path(__file__).parent / "calendars"


@pytest.fixture
def calendars_dir() -> Path:
    return CALENDARS_DIR


@pytest.fixture
def json_repository() -> JsonCalendarRepository:
    return JsonCalendarRepository(calendars_dir=CALENDARS_DIR)
