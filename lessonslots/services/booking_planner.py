"""
Application service turning stored availability into booking decisions.

The planner fetches a teacher's weekly availability and booked slots through
a store adapter and delegates every decision to the pure domain functions.
Keeping the store behind a protocol lets the YAML-backed adapter, a database
adapter or a test stub be plugged in interchangeably.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Protocol, Tuple, Union

from ..config import CalendarSettings
from ..domain.exceptions import (
    BookingLimitError,
    SlotConflictError,
    SlotUnavailableError,
)
from ..domain.models import AvailabilityRange, SlotState, TimeOfDay, UserRole
from ..domain.predicates import (
    classify_slot,
    filter_available_time_slots,
    is_slot_available_for_duration,
    is_slot_overlapping_with_bookings,
)
from ..domain.slot_generation import generate_time_slots
from ..domain.time_conversion import generate_time_slot_with_duration
from ..domain.weekly import normalize_day_key

logger = logging.getLogger(__name__)


class AvailabilityStoreProtocol(Protocol):
    """Protocol describing the data access the planner needs."""

    async def get_weekly_availability(
        self,
        teacher: str,
    ) -> Dict[str, List[AvailabilityRange]]:
        """Return availability ranges per weekday key."""

    async def get_booked_slots(
        self,
        teacher: str,
        day: str,
    ) -> List[Optional[str]]:
        """Return the slot strings already booked with the teacher on a weekday."""


@dataclass(frozen=True)
class GridCell:
    """One candidate slot of a day grid and how it should render."""
    slot: str
    state: SlotState


class BookingPlanner:
    """
    Builds day grids and validates booking requests for a teacher.

    Nothing is persisted here; ``plan_booking`` returns the slot string the
    caller should store.
    """

    def __init__(
        self,
        store: AvailabilityStoreProtocol,
        settings: CalendarSettings,
    ) -> None:
        self._store = store
        self._settings = settings

    async def fetch_day(
        self,
        *,
        teacher: str,
        day: str,
    ) -> Tuple[List[AvailabilityRange], List[Optional[str]]]:
        """Fetch a teacher's availability ranges and booked slots for one weekday."""
        day = normalize_day_key(day)

        weekly = await self._store.get_weekly_availability(teacher)
        booked = await self._store.get_booked_slots(teacher, day)

        # Days without entries are simply unavailable
        return list(weekly.get(day, [])), list(booked or [])

    async def day_grid(
        self,
        *,
        teacher: str,
        day: str,
        role: Union[UserRole, str],
        duration_minutes: Optional[int] = None,
    ) -> List[GridCell]:
        """
        Build the grid a viewer sees for one weekday.

        Candidate slots come from the calendar settings; the role decides
        which of them are shown, and each shown slot is classified for a class
        of ``duration_minutes`` (the configured slot duration by default).
        """
        duration = self._settings.slot_duration if duration_minutes is None else duration_minutes
        ranges, booked = await self.fetch_day(teacher=teacher, day=day)

        all_slots = generate_time_slots(
            duration,
            self._settings.get_start_time(),
            self._settings.get_end_time(),
        )
        visible = filter_available_time_slots(all_slots, ranges, role)

        logger.debug(
            "Grid for %s on %s: %d of %d slots visible to %s",
            teacher, day, len(visible), len(all_slots), role,
        )

        return [
            GridCell(slot=slot, state=classify_slot(slot, ranges, booked, duration))
            for slot in visible
        ]

    async def plan_booking(
        self,
        *,
        teacher: str,
        day: str,
        start_time: Union[TimeOfDay, str],
        duration_minutes: int,
        active_bookings: int = 0,
    ) -> str:
        """
        Validate a booking request and return the canonical slot to persist.

        Args:
            teacher: Teacher identifier understood by the store
            day: Weekday key
            start_time: Requested start time
            duration_minutes: Class duration from the student's plan
            active_bookings: Confirmed bookings the student already holds

        Returns:
            Slot string such as ``"10:30-12:00"``

        Raises:
            SlotUnavailableError: If the class does not fit the availability
            SlotConflictError: If the class overlaps an existing booking
            BookingLimitError: If the student reached the booking limit
        """
        slot = generate_time_slot_with_duration(start_time, duration_minutes)
        ranges, booked = await self.fetch_day(teacher=teacher, day=day)

        if not is_slot_available_for_duration(slot, ranges, duration_minutes):
            raise SlotUnavailableError(f"{teacher} is not available for {slot} on {day}")

        if is_slot_overlapping_with_bookings(slot, booked, duration_minutes):
            raise SlotConflictError(f"{slot} on {day} overlaps an existing booking")

        limit = self._settings.max_bookings_per_student
        if active_bookings >= limit:
            raise BookingLimitError(f"Booking limit of {limit} reached")

        logger.info("Slot %s on %s is bookable with %s", slot, day, teacher)
        return slot
