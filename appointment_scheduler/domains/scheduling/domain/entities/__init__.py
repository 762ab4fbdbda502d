"""
Scheduling Domain Entities
"""

from .appointment import Appointment
from .holiday import Holiday
from .service import Service
from .staff_member import StaffMember, WeeklySchedule

__all__ = [
    "Appointment",
    "Holiday",
    "Service",
    "StaffMember",
    "WeeklySchedule",
]
