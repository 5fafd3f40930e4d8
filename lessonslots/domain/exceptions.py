"""
Domain-specific exception hierarchy for the lesson scheduling engine.
"""


class SchedulingError(Exception):
    """Base class for all scheduling errors."""


class InvalidTimeError(SchedulingError, ValueError):
    """Raised when a time-of-day string cannot be parsed."""


class InvalidSlotError(SchedulingError, ValueError):
    """Raised when a time-slot string has no usable start/end pair."""


class InvalidRangeError(SchedulingError, ValueError):
    """Raised when an interval does not end after it starts."""


class InvalidDurationError(SchedulingError, ValueError):
    """Raised when a class duration is not a positive number of minutes."""


class InvalidDayError(SchedulingError, ValueError):
    """Raised when a weekday key is not one of monday..sunday."""


class BookingRejectedError(SchedulingError):
    """Raised when a requested class cannot be booked."""


class SlotUnavailableError(BookingRejectedError):
    """The teacher is not available for the whole requested slot."""


class SlotConflictError(BookingRejectedError):
    """The requested slot overlaps an existing booking."""


class BookingLimitError(BookingRejectedError):
    """The student already holds the maximum number of bookings."""
