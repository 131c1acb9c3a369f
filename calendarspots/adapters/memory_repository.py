"""
In-memory calendar repository for tests and embedding.
"""

from typing import Any, Dict, Mapping, Optional

from ..domain.exceptions import CalendarNotFoundError
from ..domain.models import CalendarConfig
from .schema import parse_calendar_document


class InMemoryCalendarRepository:
    """
    Serves calendars from raw documents held in a dictionary.

    Documents go through the same schema validation as the file store.
    """

    def __init__(self, documents: Optional[Mapping[str, Dict[str, Any]]] = None):
        self._documents: Dict[str, Dict[str, Any]] = {
            str(calendar_id): document
            for calendar_id, document in (documents or {}).items()
        }

    def add(self, calendar_id: str, document: Dict[str, Any]) -> None:
        """Register or replace a calendar document."""
        self._documents[str(calendar_id)] = document

    def load(self, calendar_id: str) -> CalendarConfig:
        """Return the calendar for an identifier."""
        key = str(calendar_id)
        if key not in self._documents:
            raise CalendarNotFoundError(f"Calendar {calendar_id} does not exist")

        return parse_calendar_document(self._documents[key], source=f"memory:{key}")
