"""
Adapters layer - Availability stores backing the booking planner.
"""

from .yaml_store import ConfigAvailabilityStore

__all__ = ["ConfigAvailabilityStore"]
