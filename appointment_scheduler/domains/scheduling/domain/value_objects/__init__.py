"""
Scheduling Domain Value Objects
"""

from .active_booking import ActiveBooking
from .appointment_status import ACTIVE_STATUSES, AppointmentStatus
from .business_hours import (
    TIME_24H_PATTERN,
    WEEKDAY_NAMES,
    DailyHours,
    SchedulingConfig,
    minutes_to_clock,
    minutes_to_time,
    time_to_minutes,
)
from .time_slot import TimeSlot

__all__ = [
    "ActiveBooking",
    "AppointmentStatus",
    "ACTIVE_STATUSES",
    "DailyHours",
    "SchedulingConfig",
    "TimeSlot",
    "TIME_24H_PATTERN",
    "WEEKDAY_NAMES",
    "time_to_minutes",
    "minutes_to_time",
    "minutes_to_clock",
]
