"""
Tests for candidate slot generation.
"""

import pytest

from lessonslots.domain.exceptions import InvalidDurationError, InvalidTimeError
from lessonslots.domain.models import TimeOfDay
from lessonslots.domain.slot_generation import generate_time_slots, hours_to_time_of_day


class TestGenerateTimeSlots:
    """Tests for generate_time_slots."""

    def test_hourly_slots_for_60_minutes(self):
        """Test one slot per hour for 60-minute classes."""
        slots = generate_time_slots(60, "09:00", "12:00")

        assert slots == ["09:00-10:00", "10:00-11:00", "11:00-12:00"]

    def test_slots_for_90_minutes(self):
        """Test that slots overrunning the end are dropped."""
        slots = generate_time_slots(90, "09:00", "12:00")

        assert slots == ["09:00-10:30", "10:00-11:30"]

    def test_slots_for_40_minutes(self):
        """Test short classes still start only on the hour."""
        slots = generate_time_slots(40, "09:00", "11:00")

        assert slots == ["09:00-09:40", "10:00-10:40"]

    def test_half_hour_end(self):
        """Test that a :30 end bound is honoured."""
        slots = generate_time_slots(30, "09:00", "10:30")

        assert slots == ["09:00-09:30", "10:00-10:30"]

    def test_does_not_exceed_end(self):
        """Test that no slot finishes after the end bound."""
        slots = generate_time_slots(120, "15:00", "17:00")

        assert slots == ["15:00-17:00"]

    def test_defaults(self):
        """Test the default 08:00-16:30 grid."""
        slots = generate_time_slots(30)

        assert len(slots) == 9
        assert slots[0] == "08:00-08:30"
        assert slots[-1] == "16:00-16:30"

        hourly = generate_time_slots(60)
        assert len(hourly) == 8
        assert hourly[-1] == "15:00-16:00"

    def test_start_rounds_up_to_next_hour(self):
        """Test that a start between hours skips to the next full hour."""
        slots = generate_time_slots(60, TimeOfDay.parse("08:30"), TimeOfDay.parse("11:00"))

        assert slots == ["09:00-10:00", "10:00-11:00"]

    def test_early_and_late_hours(self):
        """Test grids at the edges of the day."""
        assert generate_time_slots(60, "06:00", "08:00") == ["06:00-07:00", "07:00-08:00"]
        assert generate_time_slots(60, "20:00", "22:00")[0] == "20:00-21:00"

    def test_ascending_order(self):
        """Test that slots are ordered by start time."""
        slots = generate_time_slots(45, "07:00", "18:00")

        assert slots == sorted(slots)

    def test_empty_when_window_too_short(self):
        """Test that a window shorter than the duration yields nothing."""
        assert generate_time_slots(90, "09:00", "10:00") == []

    def test_rejects_non_positive_duration(self):
        """Test that the duration must be positive."""
        with pytest.raises(InvalidDurationError):
            generate_time_slots(0, "09:00", "12:00")


class TestHoursToTimeOfDay:
    """Tests for converting legacy fractional hours."""

    def test_half_hour(self):
        """Test that .5 means :30."""
        assert hours_to_time_of_day(16.5) == TimeOfDay.parse("16:30")

    def test_whole_hour(self):
        """Test whole hours."""
        assert str(hours_to_time_of_day(8)) == "08:00"

    def test_negative_hours_rejected(self):
        """Test that negative hours are rejected."""
        with pytest.raises(InvalidTimeError):
            hours_to_time_of_day(-1)
