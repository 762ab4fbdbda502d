"""
Scheduling Domain Layer

Entities, value objects and domain services for appointment scheduling.
"""

from .entities import Appointment, Holiday, Service, StaffMember, WeeklySchedule
from .value_objects import (
    ACTIVE_STATUSES,
    ActiveBooking,
    AppointmentStatus,
    DailyHours,
    SchedulingConfig,
    TimeSlot,
)

__all__ = [
    "Appointment",
    "Holiday",
    "Service",
    "StaffMember",
    "WeeklySchedule",
    "ACTIVE_STATUSES",
    "ActiveBooking",
    "AppointmentStatus",
    "DailyHours",
    "SchedulingConfig",
    "TimeSlot",
]
