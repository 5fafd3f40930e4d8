"""
Containment and overlap checks between candidate slots, availability ranges
and booked slots.

Two families of checks exist. ``is_time_slot_in_any_range`` and
``is_time_slot_booked`` trust the end encoded in the slot string, while
``is_slot_available_for_duration`` and ``is_slot_overlapping_with_bookings``
re-derive the end from the requested class duration and only use the slot's
start.
"""

import logging
from typing import Any, Callable, Iterable, List, Mapping, Optional, Sequence, Union

from .exceptions import SchedulingError
from .models import AvailabilityRange, SlotState, TimeOfDay, TimeSlot, UserRole
from .time_conversion import split_time_slot

logger = logging.getLogger(__name__)

SlotLike = Union[TimeSlot, str]
RangeLike = Union[AvailabilityRange, Mapping[str, Any]]
VisibilityPolicy = Callable[[Sequence[str], Optional[Sequence[RangeLike]]], List[str]]


def _coerce_ranges(ranges: Optional[Iterable[RangeLike]]) -> List[AvailabilityRange]:
    if not ranges:
        return []
    return [AvailabilityRange.coerce(r) for r in ranges]


def _slot_for_duration(slot: SlotLike, duration_minutes: int) -> TimeSlot:
    """Rebuild ``slot`` so that it lasts exactly ``duration_minutes``."""
    if isinstance(slot, TimeSlot):
        start = slot.start
    else:
        start_time, _ = split_time_slot(slot)
        start = TimeOfDay.parse(start_time)
    return TimeSlot.starting_at(start, duration_minutes)


def _contained_in_any(slot: TimeSlot, ranges: List[AvailabilityRange]) -> bool:
    return any(r.contains(slot) for r in ranges)


def _overlaps_any(slot: TimeSlot, booked: List[TimeSlot]) -> bool:
    return any(slot.overlaps(b) for b in booked)


def parse_booked_slot(entry: Any) -> Optional[TimeSlot]:
    """
    Parse one booked-slot entry, or return ``None`` if it is unusable.

    ``None``, empty strings, non-strings, strings without a separator and
    slots that do not end after they start are all rejected.
    """
    if entry is None:
        return None
    if isinstance(entry, TimeSlot):
        return entry
    if not isinstance(entry, str) or not entry.strip():
        logger.debug("Ignoring unusable booked slot entry %r", entry)
        return None

    try:
        return TimeSlot.parse(entry)
    except SchedulingError as exc:
        logger.debug("Ignoring malformed booked slot %r: %s", entry, exc)
        return None


def parse_booked_slots(entries: Optional[Iterable[Any]]) -> List[TimeSlot]:
    """Parse booked-slot entries, dropping the ones that cannot be used."""
    if not entries:
        return []

    parsed = (parse_booked_slot(entry) for entry in entries)
    return [slot for slot in parsed if slot is not None]


def is_time_slot_in_any_range(
    slot: SlotLike,
    ranges: Optional[Sequence[RangeLike]]
) -> bool:
    """
    Check if the whole slot lies inside at least one availability range.

    No partial credit is given; an empty range list means nothing is
    available.
    """
    availability = _coerce_ranges(ranges)
    if not availability:
        return False

    return _contained_in_any(TimeSlot.coerce(slot), availability)


def is_slot_available_for_duration(
    slot: SlotLike,
    ranges: Optional[Sequence[RangeLike]],
    duration_minutes: int
) -> bool:
    """
    Check if a class of ``duration_minutes`` starting at the slot's start
    fits inside at least one availability range.

    The end encoded in ``slot`` is ignored.
    """
    availability = _coerce_ranges(ranges)
    if not availability:
        return False

    return _contained_in_any(_slot_for_duration(slot, duration_minutes), availability)


def is_time_slot_booked(slot: SlotLike, booked_slots: Optional[Iterable[Any]]) -> bool:
    """Check if the slot overlaps any booked slot."""
    booked = parse_booked_slots(booked_slots)
    if not booked:
        return False

    return _overlaps_any(TimeSlot.coerce(slot), booked)


def is_slot_overlapping_with_bookings(
    slot: SlotLike,
    booked_slots: Optional[Iterable[Any]],
    duration_minutes: int
) -> bool:
    """
    Check if a class of ``duration_minutes`` starting at the slot's start
    overlaps any booked slot.

    Malformed booked entries are ignored. Touching endpoints do not count as
    an overlap.
    """
    booked = parse_booked_slots(booked_slots)
    if not booked:
        return False

    return _overlaps_any(_slot_for_duration(slot, duration_minutes), booked)


def all_slots_for_teacher(
    all_slots: Sequence[str],
    ranges: Optional[Sequence[RangeLike]] = None
) -> List[str]:
    """Teachers see their whole grid so they can edit their availability."""
    return list(all_slots)


def filter_by_availability(
    all_slots: Sequence[str],
    ranges: Optional[Sequence[RangeLike]] = None
) -> List[str]:
    """Keep only the slots that fit inside the availability ranges."""
    availability = _coerce_ranges(ranges)
    if not availability:
        return []

    return [
        slot for slot in all_slots
        if _contained_in_any(TimeSlot.coerce(slot), availability)
    ]


def visibility_policy_for(role: Union[UserRole, str]) -> VisibilityPolicy:
    """
    Return the slot visibility strategy for a viewer role.

    String roles are matched case-insensitively; unknown roles raise
    ``ValueError``.
    """
    if isinstance(role, str) and not isinstance(role, UserRole):
        role = UserRole(role.strip().upper())

    if role is UserRole.TEACHER:
        return all_slots_for_teacher
    return filter_by_availability


def filter_available_time_slots(
    all_slots: Sequence[str],
    ranges: Optional[Sequence[RangeLike]],
    role: Union[UserRole, str]
) -> List[str]:
    """
    Filter the grid for a viewer.

    The teacher role gets every slot unchanged; every other role only sees
    slots inside the availability ranges.
    """
    policy = visibility_policy_for(role)
    return policy(all_slots, ranges)


def classify_slot(
    slot: SlotLike,
    ranges: Optional[Sequence[RangeLike]],
    booked_slots: Optional[Iterable[Any]],
    duration_minutes: int
) -> SlotState:
    """
    Decide how a grid cell renders for a class of ``duration_minutes``.

    Availability is checked first, so a slot outside every range is
    unavailable even if it also overlaps a booking.
    """
    if not is_slot_available_for_duration(slot, ranges, duration_minutes):
        return SlotState.UNAVAILABLE
    if is_slot_overlapping_with_bookings(slot, booked_slots, duration_minutes):
        return SlotState.BOOKED
    return SlotState.AVAILABLE
