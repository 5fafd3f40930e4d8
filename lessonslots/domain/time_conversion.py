"""
Conversions between time strings and minutes since midnight.

This is the leaf layer of the engine: everything else parses through here or
through the value types in ``models``.
"""

from typing import NamedTuple, Optional, Tuple, Union

from .exceptions import InvalidSlotError
from .models import SLOT_SEPARATOR, TimeOfDay, TimeSlot


class SlotMinutes(NamedTuple):
    """Start and end of a slot in minutes since midnight."""
    start: int
    end: int


def time_to_minutes(time: str) -> int:
    """
    Convert ``"HH:MM"`` to minutes since midnight.

    Unpadded components are accepted, so ``"9:5"`` gives 545.

    Raises:
        InvalidTimeError: If the string is not a valid time of day.
    """
    return TimeOfDay.parse(time).minutes


def minutes_to_time(minutes: int) -> str:
    """Render minutes since midnight as zero-padded ``"HH:MM"``."""
    return str(TimeOfDay(minutes))


def split_time_slot(slot: str) -> Tuple[str, Optional[str]]:
    """
    Split ``"09:00-10:30"`` into ``("09:00", "10:30")``.

    The shape is not validated; without a separator the end is ``None``.
    Extra separators are ignored: ``"09:00-10:00-11:00"`` splits like
    ``"09:00-10:00"``.
    """
    parts = slot.split(SLOT_SEPARATOR)
    if len(parts) < 2:
        return slot, None
    return parts[0], parts[1]


def time_slot_to_minutes(slot: str) -> SlotMinutes:
    """
    Convert a slot string to its start and end minutes.

    No ordering is enforced: ``"23:00-00:30"`` gives ``(1380, 30)``.
    """
    start, end = split_time_slot(slot)
    if end is None:
        raise InvalidSlotError(f"Slot must look like HH:MM-HH:MM, got {slot!r}")
    return SlotMinutes(start=time_to_minutes(start), end=time_to_minutes(end))


def generate_time_slot_with_duration(
    start_time: Union[TimeOfDay, str],
    duration_minutes: int
) -> str:
    """
    Build the canonical slot string for a class starting at ``start_time``.

    The end is not wrapped at midnight: ``("23:30", 60)`` gives
    ``"23:30-24:30"``.

    Raises:
        InvalidDurationError: If the duration is not positive.
    """
    start = TimeOfDay.coerce(start_time)
    return str(TimeSlot.starting_at(start, duration_minutes))
