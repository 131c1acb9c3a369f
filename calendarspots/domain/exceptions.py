"""
Domain-specific exception hierarchy for the calendarspots application.
"""


class CalendarSpotsError(Exception):
    """Base class for all application-level errors."""


class InvalidArgumentError(CalendarSpotsError, ValueError):
    """Raised when a slot query carries a malformed date or duration."""


class ConfigurationError(CalendarSpotsError):
    """Raised when a calendar configuration cannot be provided."""


class CalendarNotFoundError(ConfigurationError):
    """Raised when no calendar record exists for an identifier."""


class CalendarFormatError(ConfigurationError):
    """Raised when a calendar record exists but cannot be parsed."""


class CalendarRepositoryError(ConfigurationError):
    """Raised when the calendar store itself cannot be reached."""
