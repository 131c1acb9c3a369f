"""
Application service for querying available slots by calendar identifier.

The service resolves a calendar through a repository adapter and delegates
the slot computation to the domain-level ``SlotFinder``. Depending on a
protocol keeps the store swappable (files, HTTP, memory) and easy to stub.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Protocol

from ..domain.models import AvailableSlot, CalendarConfig
from ..domain.slot_finder import SlotFinder

logger = logging.getLogger(__name__)


class CalendarRepositoryProtocol(Protocol):
    """Protocol describing the calendar store behaviour needed by the service."""

    def load(self, calendar_id: str) -> CalendarConfig:
        """Return the calendar configuration for an identifier."""


class CalendarSpotsService:
    """
    Orchestrates calendar loading and slot finding.

    Each calendar is loaded once; its SlotFinder is reused for every later
    query since the configuration is immutable.
    """

    def __init__(
        self,
        repository: CalendarRepositoryProtocol,
        timezone: str = "UTC",
    ) -> None:
        self._repository = repository
        self._timezone = timezone
        self._finders: Dict[str, SlotFinder] = {}

    def finder_for(self, calendar_id: str) -> SlotFinder:
        """Return the SlotFinder of a calendar, loading it on first use."""
        key = str(calendar_id)
        finder = self._finders.get(key)

        if finder is None:
            logger.debug("Loading calendar %s", key)
            calendar = self._repository.load(key)
            finder = SlotFinder(calendar, timezone=self._timezone)
            self._finders[key] = finder

        return finder

    def get_available_spots(
        self,
        calendar_id: str,
        date: str,
        duration_in_min: int,
    ) -> List[AvailableSlot]:
        """Find the available slots of a calendar for a day."""
        return self.finder_for(calendar_id).get_available_spots(date, duration_in_min)
