"""
Adapters layer - Calendar stores (JSON files, HTTP, memory).
"""

from .http_repository import HttpCalendarRepository
from .json_repository import JsonCalendarRepository
from .memory_repository import InMemoryCalendarRepository
from .schema import CalendarDocument, parse_calendar_document

__all__ = [
    "CalendarDocument",
    "HttpCalendarRepository",
    "InMemoryCalendarRepository",
    "JsonCalendarRepository",
    "parse_calendar_document",
]
