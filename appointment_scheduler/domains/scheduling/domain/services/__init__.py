"""
Scheduling Domain Services
"""

from .availability_service import AvailabilityService, SlotRequest
from .conflict_detector import booking_conflicts, bookings_for_staff, intervals_overlap

__all__ = [
    "AvailabilityService",
    "SlotRequest",
    "booking_conflicts",
    "bookings_for_staff",
    "intervals_overlap",
]
