"""
Pydantic schema of the calendar JSON document.

Document format:
{
    "durationBefore": 0,
    "durationAfter": 10,
    "slots": {"10-04-2023": [{"start": "16:00", "end": "16:50"}]},
    "sessions": {"10-04-2023": [{"start": "17:00", "end": "17:30"}]}
}
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..domain.exceptions import CalendarFormatError
from ..domain.models import CalendarConfig, TimeSlot, parse_clock_time, parse_date_key


class TimeSlotDocument(BaseModel):
    """A ``{"start": "HH:mm", "end": "HH:mm"}`` entry."""
    start: str
    end: str

    @field_validator("start", "end")
    @classmethod
    def validate_clock_time(cls, v: str) -> str:
        """Ensure the value is HH:mm text."""
        try:
            parse_clock_time(v)
        except ValueError as exc:
            raise ValueError(f"Expected HH:mm time, got '{v}'") from exc
        return v

    def to_domain(self) -> TimeSlot:
        return TimeSlot.parse(self.start, self.end)


class CalendarDocument(BaseModel):
    """Calendar record as stored per calendar identifier."""
    model_config = ConfigDict(populate_by_name=True)

    duration_before: int = Field(default=0, alias="durationBefore", ge=0)
    duration_after: int = Field(default=0, alias="durationAfter", ge=0)
    slots: Dict[str, List[TimeSlotDocument]] = Field(default_factory=dict)
    sessions: Dict[str, List[TimeSlotDocument]] = Field(default_factory=dict)

    @field_validator("slots", "sessions")
    @classmethod
    def validate_date_keys(
        cls, value: Dict[str, List[TimeSlotDocument]]
    ) -> Dict[str, List[TimeSlotDocument]]:
        """Ensure every day is keyed as DD-MM-YYYY."""
        invalid_keys: List[str] = []
        for key in value:
            try:
                parse_date_key(key)
            except ValueError:
                invalid_keys.append(key)
        if invalid_keys:
            raise ValueError(f"Date keys must be DD-MM-YYYY, got {invalid_keys}")
        return value

    def to_domain(self) -> CalendarConfig:
        """Convert the document into the immutable domain configuration."""
        return CalendarConfig(
            duration_before=self.duration_before,
            duration_after=self.duration_after,
            slots={
                day: tuple(entry.to_domain() for entry in entries)
                for day, entries in self.slots.items()
            },
            sessions={
                day: tuple(entry.to_domain() for entry in entries)
                for day, entries in self.sessions.items()
            },
        )


def parse_calendar_document(data: Any, source: str) -> CalendarConfig:
    """
    Validate a raw calendar document and convert it to a CalendarConfig.

    Args:
        data: Decoded JSON document
        source: Where the document came from, used in error messages

    Raises:
        CalendarFormatError: If the document does not match the schema
    """
    if not isinstance(data, dict):
        raise CalendarFormatError(f"Calendar document {source} must be a JSON object")

    try:
        document = CalendarDocument.model_validate(data)
    except ValidationError as exc:
        raise CalendarFormatError(f"Invalid calendar document {source}: {exc}") from exc

    return document.to_domain()
