"""
Calendar repository backed by a directory of JSON documents.
"""

import json
import logging
import re
from pathlib import Path
from typing import List

from ..domain.exceptions import CalendarFormatError, CalendarNotFoundError
from ..domain.models import CalendarConfig
from .schema import parse_calendar_document

logger = logging.getLogger(__name__)

CALENDAR_FILE_PATTERN = re.compile(r"^calendar\.(?P<calendar_id>[^.]+)\.json$")


def calendar_file_name(calendar_id: str) -> str:
    """File name of the document holding a calendar."""
    return f"calendar.{calendar_id}.json"


class JsonCalendarRepository:
    """
    Loads calendars from ``<calendars_dir>/calendar.<id>.json`` files.
    """

    def __init__(self, calendars_dir: Path):
        """
        Initialize the repository.

        Args:
            calendars_dir: Directory holding the calendar documents
        """
        self.calendars_dir = Path(calendars_dir)

    def path_for(self, calendar_id: str) -> Path:
        return self.calendars_dir / calendar_file_name(str(calendar_id))

    def load(self, calendar_id: str) -> CalendarConfig:
        """
        Load a calendar by identifier.

        Raises:
            CalendarNotFoundError: If no document exists for the identifier
            CalendarFormatError: If the document is not valid JSON or does
                not match the calendar schema
        """
        path = self.path_for(calendar_id)

        if not path.is_file():
            logger.warning("Calendar %s not found at %s", calendar_id, path)
            raise CalendarNotFoundError(f"File {path} does not exist")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as exc:
            logger.warning("Calendar %s is not valid JSON: %s", calendar_id, exc)
            raise CalendarFormatError(f"Invalid JSON in {path}: {exc}") from exc
        except OSError as exc:
            raise CalendarFormatError(f"Could not read {path}: {exc}") from exc

        calendar = parse_calendar_document(data, source=str(path))
        logger.info("Loaded calendar %s from %s", calendar_id, path)
        return calendar

    def available_ids(self) -> List[str]:
        """Identifiers of every calendar document in the directory, sorted."""
        if not self.calendars_dir.is_dir():
            return []

        ids = []
        for path in self.calendars_dir.iterdir():
            match = CALENDAR_FILE_PATTERN.match(path.name)
            if match and path.is_file():
                ids.append(match.group("calendar_id"))
        return sorted(ids)
