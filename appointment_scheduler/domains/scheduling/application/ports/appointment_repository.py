"""
Appointment Repository Port

Interface for appointment data access following Clean Architecture.
"""

from datetime import date, datetime, time
from typing import Protocol, runtime_checkable

from appointment_scheduler.domains.scheduling.domain.entities import Appointment
from appointment_scheduler.domains.scheduling.domain.value_objects import ActiveBooking, AppointmentStatus


@runtime_checkable
class IAppointmentRepository(Protocol):
    """
    Appointment repository interface.

    Defines the contract for appointment data access operations.

    Example:
        ```python
        class SQLAlchemyAppointmentRepository(IAppointmentRepository):
            async def get_by_id(self, appointment_id: str) -> Appointment | None:
                # SQLAlchemy implementation
                pass
        ```
    """

    async def create(self, appointment: Appointment) -> Appointment:
        """
        Persist a new appointment.

        Args:
            appointment: Fully populated appointment (id already assigned)

        Returns:
            The stored appointment
        """
        ...

    async def get_by_id(self, appointment_id: str) -> Appointment | None:
        """
        Find appointment by ID.

        Args:
            appointment_id: Unique appointment identifier

        Returns:
            Appointment if found, None otherwise
        """
        ...

    async def list_by_email(self, email: str) -> list[Appointment]:
        """Appointments for a normalized email, ordered by date then time."""
        ...

    async def list_by_date(self, appointment_date: date) -> list[Appointment]:
        """Appointments on a date, ordered by time."""
        ...

    async def list_active_for_date(self, appointment_date: date) -> list[ActiveBooking]:
        """
        Projection of pending/confirmed appointments on a date.

        Returns:
            Start, duration and staff of each active appointment
        """
        ...

    async def update_status(self, appointment_id: str, status: AppointmentStatus) -> Appointment | None:
        """
        Set status and bump updated_at.

        Returns:
            Updated appointment, None if it does not exist
        """
        ...

    async def update_schedule(
        self,
        appointment_id: str,
        appointment_date: date,
        start_time: time,
    ) -> Appointment | None:
        """Move an appointment to a new date and time."""
        ...

    async def find_duplicate(
        self,
        email: str,
        appointment_date: date,
        service_id: str,
        start_time: time,
        staff_id: str,
    ) -> Appointment | None:
        """
        Find an active appointment with the exact same email, date, service, time and staff.
        """
        ...

    async def list_needing_action(self, now: datetime) -> list[Appointment]:
        """
        Confirmed appointments whose end is at or before ``now``.

        Args:
            now: Naive wall-clock instant

        Returns:
            Appointments, newest first
        """
        ...

    async def count_by_status(self) -> dict[AppointmentStatus, int]:
        """All-time count per status (missing statuses count as zero)."""
        ...

    async def count_by_status_since(self, since: date) -> dict[AppointmentStatus, int]:
        """Count per status for appointments dated on or after ``since``."""
        ...
