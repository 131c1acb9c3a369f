"""
Calendar repository backed by a remote document store reachable over HTTP.
"""

import logging
from typing import Optional

import requests

from ..domain.exceptions import (
    CalendarFormatError,
    CalendarNotFoundError,
    CalendarRepositoryError,
)
from ..domain.models import CalendarConfig
from .json_repository import calendar_file_name
from .schema import parse_calendar_document

logger = logging.getLogger(__name__)


class HttpCalendarRepository:
    """
    Loads calendars from ``<base_url>/calendar.<id>.json``.

    Any static file server or object store exposing the documents works.
    """

    def __init__(
        self,
        base_url: str,
        timeout: int = 10,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the repository.

        Args:
            base_url: URL of the directory holding the calendar documents
            timeout: Request timeout in seconds
            session: Optional requests session (connection reuse, testing)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.headers = {"Accept": "application/json"}

    def url_for(self, calendar_id: str) -> str:
        return f"{self.base_url}/{calendar_file_name(str(calendar_id))}"

    def load(self, calendar_id: str) -> CalendarConfig:
        """
        Fetch a calendar by identifier.

        Raises:
            CalendarNotFoundError: If the store answers 404
            CalendarRepositoryError: If the request fails for any other reason
            CalendarFormatError: If the body is not a valid calendar document
        """
        url = self.url_for(calendar_id)

        try:
            response = self.session.get(url, headers=self.headers, timeout=self.timeout)
        except requests.exceptions.RequestException as exc:
            logger.warning("Could not fetch calendar %s: %s", calendar_id, exc)
            raise CalendarRepositoryError(f"Failed to fetch {url}: {exc}") from exc

        if response.status_code == 404:
            raise CalendarNotFoundError(f"Calendar {calendar_id} not found at {url}")

        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as exc:
            logger.warning("Calendar store answered %s for %s", response.status_code, url)
            raise CalendarRepositoryError(f"Failed to fetch {url}: {exc}") from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise CalendarFormatError(f"Invalid JSON returned by {url}: {exc}") from exc

        calendar = parse_calendar_document(data, source=url)
        logger.info("Loaded calendar %s from %s", calendar_id, url)
        return calendar
