"""
Appointment Entity for Scheduling Domain

Represents a customer booking with one staff member for one service.
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Any

from appointment_scheduler.core.domain import (
    AggregateRoot,
    InvalidOperationException,
    InvalidStatusTransitionException,
)

from ..value_objects.active_booking import ActiveBooking
from ..value_objects.appointment_status import AppointmentStatus
from ..value_objects.business_hours import time_to_minutes


@dataclass
class Appointment(AggregateRoot[str]):
    """
    Appointment aggregate root for the scheduling domain.

    Service and staff names are snapshots taken at booking time; later renames
    in the directory do not touch existing appointments.

    Example:
        ```python
        appointment = Appointment(
            id=generate_uuid_str(),
            customer_name="Ada Lovelace",
            customer_email="ada@example.com",
            customer_phone="+447911123456",
            service_id="svc-cut",
            service_name="Haircut",
            staff_id="staff-1",
            staff_name="Sam",
            appointment_date=date(2030, 1, 7),
            start_time=time(9, 0),
            duration_minutes=30,
        )
        appointment.change_status(AppointmentStatus.CONFIRMED)
        ```
    """

    # Customer
    customer_name: str = ""
    customer_email: str = ""
    customer_phone: str = ""

    # References (with name snapshots)
    service_id: str = ""
    service_name: str = ""
    staff_id: str = ""
    staff_name: str = ""

    # Scheduling (naive wall clock of the business)
    appointment_date: date | None = None
    start_time: time | None = None
    duration_minutes: int = 30

    status: AppointmentStatus = AppointmentStatus.PENDING
    notes: str | None = None

    @property
    def time_str(self) -> str:
        """Start time as ``HH:MM``."""
        return self.start_time.strftime("%H:%M") if self.start_time else ""

    @property
    def start_minutes(self) -> int:
        return time_to_minutes(self.start_time) if self.start_time else 0

    @property
    def starts_at(self) -> datetime | None:
        """Naive start datetime."""
        if self.appointment_date and self.start_time:
            return datetime.combine(self.appointment_date, self.start_time)
        return None

    @property
    def ends_at(self) -> datetime | None:
        """Naive end datetime (start + duration, buffer excluded)."""
        start = self.starts_at
        if start is None:
            return None
        return start + timedelta(minutes=self.duration_minutes)

    def is_active(self) -> bool:
        return self.status.is_active()

    # Status Transitions

    def change_status(self, new_status: AppointmentStatus) -> None:
        """Apply a lifecycle transition or raise if the table forbids it."""
        if not self.status.can_transition_to(new_status):
            raise InvalidStatusTransitionException(self.status.value, new_status.value)
        self.status = new_status
        self.touch()

    def reschedule(self, new_date: date, new_time: time) -> None:
        """Move the appointment; status is left untouched."""
        if not self.status.is_active():
            raise InvalidOperationException(
                operation="reschedule",
                current_state=self.status.value,
                message=f"Cannot reschedule a {self.status.value} appointment",
            )
        self.appointment_date = new_date
        self.start_time = new_time
        self.touch()

    def to_active_booking(self) -> ActiveBooking:
        return ActiveBooking(
            staff_id=self.staff_id,
            start_minutes=self.start_minutes,
            duration_minutes=self.duration_minutes,
            appointment_id=self.id,
        )

    # Serialization

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.customer_name,
            "email": self.customer_email,
            "phone": self.customer_phone,
            "service_id": self.service_id,
            "service_name": self.service_name,
            "staff_id": self.staff_id,
            "staff_name": self.staff_name,
            "date": self.appointment_date.isoformat() if self.appointment_date else None,
            "time": self.time_str or None,
            "duration_minutes": self.duration_minutes,
            "status": self.status.value,
            "notes": self.notes,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
