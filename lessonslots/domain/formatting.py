"""
12-hour display formatting. Display only; nothing downstream parses these.
"""

from .models import TimeOfDay, TimeSlot


def format_time_to_12_hour(time: str) -> str:
    """
    Format ``"HH:MM"`` as ``"h:mm AM/PM"``.

    Example: "00:00" -> "12:00 AM", "13:30" -> "1:30 PM"
    """
    parsed = TimeOfDay.parse(time)
    hour = parsed.hour % 24
    period = "AM" if hour < 12 else "PM"
    display_hour = hour % 12 or 12
    return f"{display_hour}:{parsed.minute:02d} {period}"


def format_time_slot_to_12_hour(slot: str) -> str:
    """Format both halves of ``"HH:MM-HH:MM"`` in 12-hour form."""
    parsed = TimeSlot.parse(slot)
    return f"{format_time_to_12_hour(str(parsed.start))}-{format_time_to_12_hour(str(parsed.end))}"
