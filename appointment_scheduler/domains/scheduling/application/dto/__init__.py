"""
Scheduling DTOs

Data Transfer Objects for scheduling use cases.
"""

from dataclasses import dataclass
from typing import Any

from appointment_scheduler.domains.scheduling.domain.entities import Appointment


@dataclass
class BookingRequest:
    """Booking input as received from the caller (strings at the boundary)."""

    name: str
    email: str
    phone: str
    service_id: str
    staff_id: str
    date: str
    time: str
    notes: str | None = None


@dataclass
class StatusChangeResult:
    """Outcome of a status change; failures carry a message and machine code."""

    success: bool
    error: str | None = None
    error_code: str | None = None
    appointment: Appointment | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"success": self.success}
        if self.error:
            result["error"] = self.error
            result["error_code"] = self.error_code
        if self.appointment:
            result["appointment"] = self.appointment.to_dict()
        return result


@dataclass
class AppointmentStats:
    """All-time counts per status plus the recent no-show rate (percent)."""

    total: int = 0
    pending: int = 0
    confirmed: int = 0
    completed: int = 0
    cancelled: int = 0
    no_show: int = 0
    no_show_rate: int = 0
    window_days: int = 30

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "pending": self.pending,
            "confirmed": self.confirmed,
            "completed": self.completed,
            "cancelled": self.cancelled,
            "no_show": self.no_show,
            "no_show_rate": self.no_show_rate,
            "window_days": self.window_days,
        }


__all__ = [
    "AppointmentStats",
    "BookingRequest",
    "StatusChangeResult",
]
