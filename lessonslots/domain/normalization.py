"""
Normalisation of availability into minimal sets of ranges.

Inputs are never mutated; every function sorts a copy.
"""

from typing import Iterable, List, Optional

from .models import AvailabilityRange, TimeSlot
from .predicates import RangeLike, SlotLike


def convert_slots_to_ranges(slots: Optional[Iterable[SlotLike]]) -> List[AvailabilityRange]:
    """
    Coalesce slots into the maximal contiguous ranges covering them.

    Two slots join only when the next one starts exactly where the current
    range ends; any gap starts a new range.

    Example: [09:00-10:00, 10:00-11:00, 14:00-15:00] -> [09:00-11:00, 14:00-15:00]
    """
    if not slots:
        return []

    sorted_slots = sorted((TimeSlot.coerce(s) for s in slots), key=lambda s: s.start)
    ranges: List[AvailabilityRange] = [AvailabilityRange.from_slot(sorted_slots[0])]

    for slot in sorted_slots[1:]:
        last = ranges[-1]

        if slot.start == last.end:
            ranges[-1] = AvailabilityRange(start=last.start, end=slot.end)
        else:
            ranges.append(AvailabilityRange.from_slot(slot))

    return ranges


def merge_overlapping_ranges(ranges: Optional[Iterable[RangeLike]]) -> List[AvailabilityRange]:
    """
    Merge overlapping or touching ranges.

    Example: [09:00-11:00, 11:00-13:00] -> [09:00-13:00]
    """
    if not ranges:
        return []

    sorted_ranges = sorted(
        (AvailabilityRange.coerce(r) for r in ranges),
        key=lambda r: r.start
    )
    merged: List[AvailabilityRange] = [sorted_ranges[0]]

    for current in sorted_ranges[1:]:
        last = merged[-1]

        if current.start <= last.end:
            merged[-1] = AvailabilityRange(
                start=last.start,
                end=max(last.end, current.end)
            )
        else:
            merged.append(current)

    return merged


def add_slot_to_ranges(
    ranges: Optional[Iterable[RangeLike]],
    slot: SlotLike
) -> List[AvailabilityRange]:
    """Mark a slot as available and return the merged ranges."""
    added = AvailabilityRange.from_slot(TimeSlot.coerce(slot))
    return merge_overlapping_ranges([*(ranges or []), added])


def remove_slot_from_ranges(
    ranges: Optional[Iterable[RangeLike]],
    slot: SlotLike
) -> List[AvailabilityRange]:
    """
    Carve a slot out of the range that contains it.

    The containing range is trimmed at the head or tail, split in two, or
    dropped when it equals the slot. Ranges that do not fully contain the
    slot are kept as they are.

    Example: [09:00-12:00] minus 10:00-11:00 -> [09:00-10:00, 11:00-12:00]
    """
    removed = TimeSlot.coerce(slot)
    result: List[AvailabilityRange] = []

    for value in ranges or []:
        current = AvailabilityRange.coerce(value)

        if not current.contains(removed):
            result.append(current)
            continue

        if current.start < removed.start:
            result.append(AvailabilityRange(start=current.start, end=removed.start))
        if removed.end < current.end:
            result.append(AvailabilityRange(start=removed.end, end=current.end))

    return result
