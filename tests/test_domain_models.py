"""
Tests for domain models.
"""

from datetime import time

import pendulum
import pytest

from calendarspots.domain.models import (
    AvailableSlot,
    CalendarConfig,
    TimeSlot,
    fixed_offset_timezone,
    parse_clock_time,
    parse_date_key,
)


class TestTimeSlot:
    """Tests for TimeSlot model."""

    def test_parse(self):
        """Test building a slot from HH:mm text."""
        slot = TimeSlot.parse("09:30", "17:00")

        assert slot.start == time(9, 30)
        assert slot.end == time(17, 0)
        assert slot.duration_minutes() == 450

    @pytest.mark.parametrize("value", ["9:30", "24:00", "12:60", "12-30", "", "12:30:00"])
    def test_parse_invalid_clock_time(self, value):
        """Test that anything but HH:mm is rejected."""
        with pytest.raises(ValueError):
            parse_clock_time(value)

    def test_format(self):
        """Test display formatting."""
        assert str(TimeSlot.parse("08:05", "09:00")) == "08:05 - 09:00"


class TestConflicts:
    """Tests for the slot/session overlap rule."""

    session = TimeSlot.parse("10:00", "11:00")

    def test_identical_slot_conflicts(self):
        assert TimeSlot.parse("10:00", "11:00").conflicts_with(self.session)

    def test_start_inside_session_conflicts(self):
        assert TimeSlot.parse("10:30", "11:30").conflicts_with(self.session)

    def test_end_inside_session_conflicts(self):
        assert TimeSlot.parse("09:30", "10:30").conflicts_with(self.session)

    def test_slot_containing_session_conflicts(self):
        assert TimeSlot.parse("09:00", "12:00").conflicts_with(self.session)

    def test_slot_strictly_inside_session_conflicts(self):
        assert TimeSlot.parse("10:15", "10:45").conflicts_with(self.session)

    def test_slot_ending_when_session_starts_is_free(self):
        assert not TimeSlot.parse("09:00", "10:00").conflicts_with(self.session)

    def test_slot_starting_when_session_ends_is_free(self):
        assert not TimeSlot.parse("11:00", "12:00").conflicts_with(self.session)

    def test_shared_start_with_earlier_end_conflicts(self):
        """The slot end lies strictly inside the session."""
        assert TimeSlot.parse("10:00", "10:30").conflicts_with(self.session)

    def test_shared_end_with_later_start_conflicts(self):
        """The slot start lies strictly inside the session."""
        assert TimeSlot.parse("10:30", "11:00").conflicts_with(self.session)

    def test_shared_start_with_later_end_is_free(self):
        """Neither edge is strictly inside and the slot does not strictly contain the session."""
        assert not TimeSlot.parse("10:00", "12:00").conflicts_with(self.session)

    def test_disjoint_slot_is_free(self):
        assert not TimeSlot.parse("13:00", "14:00").conflicts_with(self.session)


class TestCalendarConfig:
    """Tests for CalendarConfig model."""

    def test_missing_day_defaults_to_empty(self):
        calendar = CalendarConfig(duration_before=5, duration_after=10)

        assert calendar.slots_for("10-04-2023") == ()
        assert calendar.sessions_for("10-04-2023") == ()

    def test_days_in_calendar_order(self):
        slot = TimeSlot.parse("09:00", "10:00")
        calendar = CalendarConfig(
            slots={"02-05-2023": (slot,), "30-04-2023": (slot,)},
            sessions={"01-05-2023": (slot,), "30-04-2023": (slot,)},
        )

        assert calendar.days() == ["30-04-2023", "01-05-2023", "02-05-2023"]


class TestParseDateKey:
    """Tests for strict DD-MM-YYYY parsing."""

    def test_valid_date(self):
        assert parse_date_key("10-04-2023") == pendulum.date(2023, 4, 10)

    @pytest.mark.parametrize(
        "value",
        ["31-02-2023", "1-04-2023", "10-4-2023", "2023-04-10", "10/04/2023", "10-04-23", "10-04-923", "10-04-2023x", ""],
    )
    def test_invalid_date(self, value):
        with pytest.raises(ValueError):
            parse_date_key(value)


class TestFixedOffsetTimezone:
    """Tests for the anchoring offset."""

    def test_utc(self):
        assert fixed_offset_timezone("UTC").utcoffset(None).total_seconds() == 0
        assert fixed_offset_timezone("utc").utcoffset(None).total_seconds() == 0

    @pytest.mark.parametrize(
        "value, seconds",
        [("+02:00", 7200), ("-05:30", -19800), ("+00:00", 0)],
    )
    def test_offsets(self, value, seconds):
        assert fixed_offset_timezone(value).utcoffset(None).total_seconds() == seconds

    @pytest.mark.parametrize("value", ["Europe/Berlin", "+2:00", "+0200", "+15:00", "+02:60", ""])
    def test_rejected(self, value):
        with pytest.raises(ValueError):
            fixed_offset_timezone(value)


class TestAvailableSlot:
    """Tests for AvailableSlot model."""

    def test_to_dict(self):
        start = pendulum.datetime(2023, 4, 10, 16, 0, tz="UTC")
        slot = AvailableSlot(
            start_hour=start,
            end_hour=start.add(minutes=50),
            client_start_hour=start.add(minutes=10),
            client_end_hour=start.add(minutes=40),
        )

        assert slot.to_dict() == {
            "startHour": "2023-04-10T16:00:00Z",
            "endHour": "2023-04-10T16:50:00Z",
            "clientStartHour": "2023-04-10T16:10:00Z",
            "clientEndHour": "2023-04-10T16:40:00Z",
        }

    def test_format_display(self):
        start = pendulum.datetime(2023, 4, 10, 16, 0, tz="UTC")
        slot = AvailableSlot(
            start_hour=start,
            end_hour=start.add(minutes=50),
            client_start_hour=start.add(minutes=10),
            client_end_hour=start.add(minutes=40),
        )

        assert slot.format_display() == (
            "Monday, 10.04.2023 | 16:00 – 16:50 (client 16:10 – 16:40)"
        )
