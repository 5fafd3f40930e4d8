"""
Service layer helpers that orchestrate adapters and domain logic.
"""

from .booking_planner import AvailabilityStoreProtocol, BookingPlanner, GridCell

__all__ = ["AvailabilityStoreProtocol", "BookingPlanner", "GridCell"]
