"""
Tests for time conversion helpers.
"""

import pytest

from lessonslots.domain.exceptions import (
    InvalidDurationError,
    InvalidSlotError,
    InvalidTimeError,
)
from lessonslots.domain.time_conversion import (
    generate_time_slot_with_duration,
    minutes_to_time,
    split_time_slot,
    time_slot_to_minutes,
    time_to_minutes,
)


class TestTimeToMinutes:
    """Tests for time_to_minutes."""

    def test_converts_padded_times(self):
        """Test conversion of canonical HH:MM strings."""
        assert time_to_minutes("00:00") == 0
        assert time_to_minutes("01:00") == 60
        assert time_to_minutes("09:30") == 570
        assert time_to_minutes("12:00") == 720
        assert time_to_minutes("23:59") == 1439

    def test_accepts_single_digit_components(self):
        """Test that unpadded hours and minutes are tolerated."""
        assert time_to_minutes("9:5") == 545
        assert time_to_minutes("1:1") == 61

    @pytest.mark.parametrize("value", ["", "9", "ab:cd", "09:00:00", "-1:00", "09:75"])
    def test_rejects_malformed_input(self, value):
        """Test that malformed strings fail fast instead of producing garbage."""
        with pytest.raises(InvalidTimeError):
            time_to_minutes(value)

    def test_invalid_time_is_a_value_error(self):
        """Callers catching ValueError also catch parse failures."""
        with pytest.raises(ValueError):
            time_to_minutes("noon")


class TestMinutesToTime:
    """Tests for minutes_to_time."""

    def test_round_trip(self):
        """Test that every canonical time survives a round trip."""
        for minutes in range(0, 24 * 60, 7):
            text = minutes_to_time(minutes)
            assert time_to_minutes(text) == minutes
            assert minutes_to_time(time_to_minutes(text)) == text

    def test_zero_padding(self):
        """Test that hours and minutes are zero-padded."""
        assert minutes_to_time(545) == "09:05"
        assert minutes_to_time(0) == "00:00"

    def test_hours_past_midnight_are_literal(self):
        """Test that values past 24:00 are not wrapped."""
        assert minutes_to_time(1470) == "24:30"


class TestSplitTimeSlot:
    """Tests for split_time_slot and time_slot_to_minutes."""

    def test_split(self):
        """Test splitting a slot into start and end."""
        assert split_time_slot("09:00-10:00") == ("09:00", "10:00")
        assert split_time_slot("14:30-16:00") == ("14:30", "16:00")

    def test_split_without_separator(self):
        """Test that a missing separator yields no end."""
        assert split_time_slot("invalid") == ("invalid", None)

    def test_slot_to_minutes(self):
        """Test conversion of slots to start and end minutes."""
        result = time_slot_to_minutes("09:00-10:30")
        assert result.start == 540
        assert result.end == 630

        afternoon = time_slot_to_minutes("14:00-15:30")
        assert (afternoon.start, afternoon.end) == (840, 930)

    def test_cross_midnight_slot_is_not_wrapped(self):
        """Test that raw conversion keeps the end as written."""
        minutes = time_slot_to_minutes("23:00-00:30")
        assert minutes.start == 1380
        assert minutes.end == 30

    def test_slot_without_end_raises(self):
        """Test that a slot without an end part is rejected."""
        with pytest.raises(InvalidSlotError):
            time_slot_to_minutes("09:00")


class TestGenerateTimeSlotWithDuration:
    """Tests for generate_time_slot_with_duration."""

    @pytest.mark.parametrize(
        "start, duration, expected",
        [
            ("09:00", 60, "09:00-10:00"),
            ("14:30", 40, "14:30-15:10"),
            ("09:00", 90, "09:00-10:30"),
            ("09:30", 30, "09:30-10:00"),
            ("09:45", 30, "09:45-10:15"),
            ("11:50", 20, "11:50-12:10"),
            ("14:00", 5, "14:00-14:05"),
            ("08:00", 240, "08:00-12:00"),
            ("09:05", 55, "09:05-10:00"),
        ],
    )
    def test_generates_slot(self, start, duration, expected):
        """Test the canonical slot string for various durations."""
        assert generate_time_slot_with_duration(start, duration) == expected

    def test_pads_unpadded_start(self):
        """Test that the generated slot is always zero-padded."""
        assert generate_time_slot_with_duration("8:0", 30) == "08:00-08:30"

    def test_duration_past_midnight_is_literal(self):
        """Test that the end hour is rendered past 24 rather than wrapped."""
        assert generate_time_slot_with_duration("23:30", 60) == "23:30-24:30"

    def test_consistent_with_time_to_minutes(self):
        """Test that the generated end matches minute arithmetic."""
        slot = generate_time_slot_with_duration("10:10", 95)
        minutes = time_slot_to_minutes(slot)
        assert minutes.end - minutes.start == 95

    @pytest.mark.parametrize("duration", [0, -30])
    def test_rejects_non_positive_duration(self, duration):
        """Test that zero or negative durations are rejected."""
        with pytest.raises(InvalidDurationError):
            generate_time_slot_with_duration("09:00", duration)
