"""
Domain layer - Pure scheduling logic without external dependencies.
"""

from .exceptions import (
    BookingLimitError,
    BookingRejectedError,
    InvalidDayError,
    InvalidDurationError,
    InvalidRangeError,
    InvalidSlotError,
    InvalidTimeError,
    SchedulingError,
    SlotConflictError,
    SlotUnavailableError,
)
from .formatting import format_time_slot_to_12_hour, format_time_to_12_hour
from .models import AvailabilityRange, SlotState, TimeOfDay, TimeSlot, UserRole
from .normalization import (
    add_slot_to_ranges,
    convert_slots_to_ranges,
    merge_overlapping_ranges,
    remove_slot_from_ranges,
)
from .predicates import (
    all_slots_for_teacher,
    classify_slot,
    filter_available_time_slots,
    filter_by_availability,
    is_slot_available_for_duration,
    is_slot_overlapping_with_bookings,
    is_time_slot_booked,
    is_time_slot_in_any_range,
    parse_booked_slot,
    parse_booked_slots,
    visibility_policy_for,
)
from .slot_generation import generate_time_slots, hours_to_time_of_day
from .time_conversion import (
    SlotMinutes,
    generate_time_slot_with_duration,
    minutes_to_time,
    split_time_slot,
    time_slot_to_minutes,
    time_to_minutes,
)
from .weekly import DAY_KEYS, day_key_for, group_availability_by_day, normalize_day_key

__all__ = [
    "AvailabilityRange",
    "BookingLimitError",
    "BookingRejectedError",
    "DAY_KEYS",
    "InvalidDayError",
    "InvalidDurationError",
    "InvalidRangeError",
    "InvalidSlotError",
    "InvalidTimeError",
    "SchedulingError",
    "SlotConflictError",
    "SlotMinutes",
    "SlotState",
    "SlotUnavailableError",
    "TimeOfDay",
    "TimeSlot",
    "UserRole",
    "add_slot_to_ranges",
    "all_slots_for_teacher",
    "classify_slot",
    "convert_slots_to_ranges",
    "day_key_for",
    "filter_available_time_slots",
    "filter_by_availability",
    "format_time_slot_to_12_hour",
    "format_time_to_12_hour",
    "generate_time_slot_with_duration",
    "generate_time_slots",
    "group_availability_by_day",
    "hours_to_time_of_day",
    "is_slot_available_for_duration",
    "is_slot_overlapping_with_bookings",
    "is_time_slot_booked",
    "is_time_slot_in_any_range",
    "merge_overlapping_ranges",
    "minutes_to_time",
    "normalize_day_key",
    "parse_booked_slot",
    "parse_booked_slots",
    "remove_slot_from_ranges",
    "split_time_slot",
    "time_slot_to_minutes",
    "time_to_minutes",
    "visibility_policy_for",
]
