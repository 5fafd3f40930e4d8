"""
Weekday keys and per-day grouping of a teacher's availability.

The data layer stores availability as rows of (day, start_time, end_time);
callers work with ``{day: [AvailabilityRange, ...]}`` keyed by lowercase
English weekday names.
"""

from datetime import date
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Tuple, Union

import pendulum

from .exceptions import InvalidDayError
from .models import AvailabilityRange
from .normalization import merge_overlapping_ranges

DAY_KEYS: Tuple[str, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

AvailabilityRow = Union[Sequence[str], Mapping[str, Any]]


def normalize_day_key(day: str) -> str:
    """Lower-case and validate a weekday key."""
    key = day.strip().lower() if isinstance(day, str) else ""
    if key not in DAY_KEYS:
        raise InvalidDayError(
            f"Unknown day {day!r}. Expected one of: {', '.join(DAY_KEYS)}"
        )
    return key


def day_key_for(value: Union[date, str]) -> str:
    """
    Return the weekday key of a date.

    Accepts ``datetime.date`` (including pendulum ``Date``/``DateTime``) or an
    ISO ``YYYY-MM-DD`` string.
    """
    if isinstance(value, str):
        try:
            value = pendulum.parse(value, exact=True)
        except ValueError as exc:
            raise InvalidDayError(f"Cannot parse date {value!r}: {exc}") from exc

    if not isinstance(value, date):
        raise InvalidDayError(f"Not a calendar date: {value!r}")

    return DAY_KEYS[value.weekday()]


def _split_row(row: AvailabilityRow) -> Tuple[str, AvailabilityRange]:
    if isinstance(row, Mapping):
        return normalize_day_key(row["day"]), AvailabilityRange.coerce(row)

    day, start_time, end_time = row
    return normalize_day_key(day), AvailabilityRange.parse(start_time, end_time)


def group_availability_by_day(
    rows: Iterable[AvailabilityRow]
) -> Dict[str, List[AvailabilityRange]]:
    """
    Group availability rows by day and merge each day's ranges.

    Days appear in weekday order; days without rows are left out.
    """
    grouped: Dict[str, List[AvailabilityRange]] = {}

    for row in rows:
        day, availability = _split_row(row)
        grouped.setdefault(day, []).append(availability)

    return {
        day: merge_overlapping_ranges(grouped[day])
        for day in DAY_KEYS
        if day in grouped
    }
