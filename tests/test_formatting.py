"""
Tests for 12-hour display formatting.
"""

from lessonslots.domain.formatting import format_time_slot_to_12_hour, format_time_to_12_hour


class TestFormatTimeTo12Hour:
    """Tests for format_time_to_12_hour."""

    def test_am_times(self):
        """Test midnight and morning times."""
        assert format_time_to_12_hour("00:00") == "12:00 AM"
        assert format_time_to_12_hour("01:30") == "1:30 AM"
        assert format_time_to_12_hour("09:45") == "9:45 AM"
        assert format_time_to_12_hour("11:59") == "11:59 AM"

    def test_pm_times(self):
        """Test noon and afternoon times."""
        assert format_time_to_12_hour("12:00") == "12:00 PM"
        assert format_time_to_12_hour("13:30") == "1:30 PM"
        assert format_time_to_12_hour("18:45") == "6:45 PM"
        assert format_time_to_12_hour("23:59") == "11:59 PM"

    def test_minutes_zero_padded(self):
        """Test that minutes keep two digits."""
        assert format_time_to_12_hour("9:5") == "9:05 AM"


class TestFormatTimeSlotTo12Hour:
    """Tests for format_time_slot_to_12_hour."""

    def test_slots(self):
        """Test formatting both halves of a slot."""
        assert format_time_slot_to_12_hour("09:00-10:00") == "9:00 AM-10:00 AM"
        assert format_time_slot_to_12_hour("14:00-15:30") == "2:00 PM-3:30 PM"
        assert format_time_slot_to_12_hour("09:00-17:00") == "9:00 AM-5:00 PM"

    def test_midnight_and_noon(self):
        """Test slots around midnight and noon."""
        assert format_time_slot_to_12_hour("00:00-01:00") == "12:00 AM-1:00 AM"
        assert format_time_slot_to_12_hour("11:00-13:00") == "11:00 AM-1:00 PM"
