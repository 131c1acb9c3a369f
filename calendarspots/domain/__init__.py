"""
Domain layer - Pure business logic without external dependencies.
"""

from .exceptions import (
    CalendarFormatError,
    CalendarNotFoundError,
    CalendarRepositoryError,
    CalendarSpotsError,
    ConfigurationError,
    InvalidArgumentError,
)
from .models import AvailableSlot, CalendarConfig, TimeSlot
from .slot_finder import SlotFinder

__all__ = [
    "AvailableSlot",
    "CalendarConfig",
    "TimeSlot",
    "SlotFinder",
    "CalendarSpotsError",
    "InvalidArgumentError",
    "ConfigurationError",
    "CalendarNotFoundError",
    "CalendarFormatError",
    "CalendarRepositoryError",
]
