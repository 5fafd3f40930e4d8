"""
Candidate slot generation for the booking grid.
"""

import math
from typing import List, Union

from .exceptions import InvalidTimeError
from .models import MINUTES_PER_HOUR, TimeOfDay, TimeSlot

DEFAULT_GRID_START = TimeOfDay(8 * MINUTES_PER_HOUR)
DEFAULT_GRID_END = TimeOfDay(16 * MINUTES_PER_HOUR + 30)


def hours_to_time_of_day(hours: float) -> TimeOfDay:
    """
    Convert a fractional hour such as ``16.5`` into a time of day (16:30).

    Calendar settings stored before bounds became times of day used this form.
    """
    if hours < 0:
        raise InvalidTimeError(f"Hour must not be negative, got {hours}")
    return TimeOfDay(int(round(hours * MINUTES_PER_HOUR)))


def generate_time_slots(
    slot_duration: int,
    start: Union[TimeOfDay, str] = DEFAULT_GRID_START,
    end: Union[TimeOfDay, str] = DEFAULT_GRID_END
) -> List[str]:
    """
    Enumerate one candidate slot per whole hour between ``start`` and ``end``.

    Each slot begins on the hour and lasts ``slot_duration`` minutes. A slot
    is kept only if it finishes no later than ``end``. This is not a general
    slot generator: it never yields more than one slot per hour.

    Args:
        slot_duration: Length of each slot in minutes
        start: First time a slot may begin (rounded up to the next full hour)
        end: Latest time a slot may finish

    Returns:
        Slot strings in ascending order
    """
    start = TimeOfDay.coerce(start)
    end = TimeOfDay.coerce(end)

    first_hour = math.ceil(start.minutes / MINUTES_PER_HOUR)
    last_hour = math.ceil(end.minutes / MINUTES_PER_HOUR)

    slots: List[str] = []

    for hour in range(first_hour, last_hour):
        slot = TimeSlot.starting_at(TimeOfDay(hour * MINUTES_PER_HOUR), slot_duration)

        if slot.end <= end:
            slots.append(str(slot))

    return slots
