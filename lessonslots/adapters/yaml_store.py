"""
Availability store backed by the teachers section of the config file.

Lets the planner and the CLI run against real-looking data without a
database.
"""

import logging
from typing import Dict, List, Optional

from ..config import AppConfig
from ..domain.models import AvailabilityRange
from ..domain.weekly import normalize_day_key

logger = logging.getLogger(__name__)


class ConfigAvailabilityStore:
    """
    Serves availability and bookings from an ``AppConfig``.

    Teachers are looked up by name or email, as in the CLI.
    """

    def __init__(self, config: AppConfig):
        self.config = config

    async def get_weekly_availability(self, teacher: str) -> Dict[str, List[AvailabilityRange]]:
        """
        Return merged availability ranges per weekday.

        Raises:
            ValueError: If the teacher is not configured
        """
        entry = self.config.resolve_teacher(teacher)
        weekly = {day: entry.get_ranges(day) for day in entry.availability}

        logger.debug("Loaded availability for %s on %d day(s)", entry.name, len(weekly))
        return weekly

    async def get_booked_slots(self, teacher: str, day: str) -> List[Optional[str]]:
        """Return the raw booked slot entries of a teacher on a weekday."""
        entry = self.config.resolve_teacher(teacher)
        return entry.get_bookings(normalize_day_key(day))
