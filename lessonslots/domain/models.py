"""
Domain models for time-of-day values, class slots and availability ranges.

Strings such as ``"09:30"`` and ``"09:00-10:00"`` are parsed into these value
types at the edge; the algorithms work on integer minutes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Union

from .exceptions import (
    InvalidDurationError,
    InvalidRangeError,
    InvalidSlotError,
    InvalidTimeError,
)

MINUTES_PER_HOUR = 60
SLOT_SEPARATOR = "-"


class UserRole(str, Enum):
    """Roles a viewer of the booking grid can have."""
    ADMIN = "ADMIN"
    TEACHER = "TEACHER"
    STUDENT = "STUDENT"
    GUEST = "GUEST"
    EDITOR = "EDITOR"


class SlotState(str, Enum):
    """Render state of a single cell in a day grid."""
    AVAILABLE = "available"
    BOOKED = "booked"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True, order=True)
class TimeOfDay:
    """
    Wall-clock time within a day, stored as minutes since midnight.

    Values of 24:00 and later are allowed so that a class running past
    midnight can still be rendered literally (``"23:30"`` + 60 -> ``"24:30"``).
    """
    minutes: int

    def __post_init__(self):
        if isinstance(self.minutes, bool) or not isinstance(self.minutes, int):
            raise InvalidTimeError(f"Minutes must be an integer, got {self.minutes!r}")
        if self.minutes < 0:
            raise InvalidTimeError(f"Minutes must not be negative, got {self.minutes}")

    @classmethod
    def parse(cls, text: str) -> "TimeOfDay":
        """
        Parse an ``"HH:MM"`` string. Unpadded components are accepted.

        Raises:
            InvalidTimeError: If the string is not two non-negative integers
                separated by a colon, or the minute exceeds 59.
        """
        if not isinstance(text, str):
            raise InvalidTimeError(f"Time must be a string, got {text!r}")

        parts = text.strip().split(":")
        if len(parts) != 2:
            raise InvalidTimeError(f"Time must look like HH:MM, got {text!r}")

        try:
            hour = int(parts[0])
            minute = int(parts[1])
        except ValueError:
            raise InvalidTimeError(f"Time must look like HH:MM, got {text!r}") from None

        if hour < 0 or not 0 <= minute < MINUTES_PER_HOUR:
            raise InvalidTimeError(f"Time out of range: {text!r}")

        return cls(hour * MINUTES_PER_HOUR + minute)

    @classmethod
    def coerce(cls, value: Union["TimeOfDay", str]) -> "TimeOfDay":
        if isinstance(value, TimeOfDay):
            return value
        return cls.parse(value)

    @property
    def hour(self) -> int:
        return self.minutes // MINUTES_PER_HOUR

    @property
    def minute(self) -> int:
        return self.minutes % MINUTES_PER_HOUR

    def plus(self, minutes: int) -> "TimeOfDay":
        """Return the time ``minutes`` later, without wrapping at midnight."""
        return TimeOfDay(self.minutes + minutes)

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


@dataclass(frozen=True)
class TimeSlot:
    """
    Half-open interval ``[start, end)`` booked or offered for a class.

    Invariant: start must be before end.
    """
    start: TimeOfDay
    end: TimeOfDay

    def __post_init__(self):
        if self.end <= self.start:
            raise InvalidRangeError(
                f"Slot end {self.end} must be after start {self.start}"
            )

    @classmethod
    def parse(cls, text: str) -> "TimeSlot":
        """
        Parse an ``"HH:MM-HH:MM"`` string.

        Anything after a second separator is ignored, as in
        ``split_time_slot``.

        Raises:
            InvalidSlotError: If the separator or either side is missing.
            InvalidTimeError: If either side is not a valid time.
            InvalidRangeError: If the slot does not end after it starts.
        """
        if not isinstance(text, str):
            raise InvalidSlotError(f"Slot must be a string, got {text!r}")

        parts = text.split(SLOT_SEPARATOR)
        if len(parts) < 2 or not parts[0].strip() or not parts[1].strip():
            raise InvalidSlotError(f"Slot must look like HH:MM-HH:MM, got {text!r}")

        return cls(TimeOfDay.parse(parts[0]), TimeOfDay.parse(parts[1]))

    @classmethod
    def coerce(cls, value: Union["TimeSlot", str]) -> "TimeSlot":
        if isinstance(value, TimeSlot):
            return value
        return cls.parse(value)

    @classmethod
    def starting_at(cls, start: TimeOfDay, duration_minutes: int) -> "TimeSlot":
        """Build the slot a class of ``duration_minutes`` occupies from ``start``."""
        if isinstance(duration_minutes, bool) or not isinstance(duration_minutes, int):
            raise InvalidDurationError(
                f"Duration must be an integer number of minutes, got {duration_minutes!r}"
            )
        if duration_minutes <= 0:
            raise InvalidDurationError(
                f"Duration must be greater than zero, got {duration_minutes}"
            )
        return cls(start, start.plus(duration_minutes))

    def duration_minutes(self) -> int:
        return self.end.minutes - self.start.minutes

    def overlaps(self, other: "TimeSlot") -> bool:
        """Check if two slots share time. Touching endpoints do not overlap."""
        return self.start < other.end and self.end > other.start

    def __str__(self) -> str:
        return f"{self.start}{SLOT_SEPARATOR}{self.end}"


@dataclass(frozen=True)
class AvailabilityRange:
    """
    A contiguous window in which a teacher can be booked.

    Invariant: start must be before end. Ranges crossing midnight are
    rejected rather than wrapped.
    """
    start: TimeOfDay
    end: TimeOfDay

    def __post_init__(self):
        if self.end <= self.start:
            raise InvalidRangeError(
                f"Range end {self.end} must be after start {self.start}"
            )

    @classmethod
    def parse(cls, start_time: str, end_time: str) -> "AvailabilityRange":
        return cls(TimeOfDay.parse(start_time), TimeOfDay.parse(end_time))

    @classmethod
    def coerce(cls, value: Union["AvailabilityRange", Mapping[str, Any]]) -> "AvailabilityRange":
        """
        Accept a range or a mapping as stored by the data layer.

        Both ``start_time``/``end_time`` and ``startTime``/``endTime`` keys
        are understood.
        """
        if isinstance(value, AvailabilityRange):
            return value

        if not isinstance(value, Mapping):
            raise InvalidRangeError(f"Cannot build an availability range from {value!r}")

        start_time = value.get("start_time", value.get("startTime"))
        end_time = value.get("end_time", value.get("endTime"))
        if start_time is None or end_time is None:
            raise InvalidRangeError(f"Availability range is missing a bound: {dict(value)!r}")

        return cls.parse(start_time, end_time)

    @classmethod
    def from_slot(cls, slot: TimeSlot) -> "AvailabilityRange":
        return cls(slot.start, slot.end)

    @property
    def start_time(self) -> str:
        return str(self.start)

    @property
    def end_time(self) -> str:
        return str(self.end)

    def duration_minutes(self) -> int:
        return self.end.minutes - self.start.minutes

    def contains(self, slot: TimeSlot) -> bool:
        """True if the whole slot lies within this range."""
        return slot.start >= self.start and slot.end <= self.end

    def to_dict(self) -> Dict[str, str]:
        return {"start_time": self.start_time, "end_time": self.end_time}

    def __str__(self) -> str:
        return f"{self.start_time}{SLOT_SEPARATOR}{self.end_time}"
