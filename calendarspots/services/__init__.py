"""
Service layer helpers that orchestrate adapters and domain logic.
"""

from .calendar_spots import CalendarRepositoryProtocol, CalendarSpotsService

__all__ = ["CalendarRepositoryProtocol", "CalendarSpotsService"]
