"""
Appointment Query Use Cases

Read-only lookups by id, email and date, plus the admin "needs action" list.
"""

import logging

from appointment_scheduler.core.domain import EntityNotFoundException, ValidationException
from appointment_scheduler.domains.scheduling.application.ports import IAppointmentRepository
from appointment_scheduler.domains.scheduling.domain.entities import Appointment
from appointment_scheduler.domains.scheduling.domain.services.booking_rules import (
    Clock,
    parse_date,
    server_now,
    utc_now,
)
from appointment_scheduler.domains.scheduling.domain.value_objects import AppointmentStatus

logger = logging.getLogger(__name__)


class GetAppointmentsUseCase:
    """
    Query side of the scheduler.

    Example:
        ```python
        queries = GetAppointmentsUseCase(repo)
        upcoming = await queries.lookup_upcoming("ada@example.com")
        ```
    """

    def __init__(self, appointment_repository: IAppointmentRepository, clock: Clock = utc_now):
        self.appointment_repo = appointment_repository
        self.clock = clock

    async def get_by_id(self, appointment_id: str) -> Appointment:
        appointment = await self.appointment_repo.get_by_id(appointment_id)
        if appointment is None:
            raise EntityNotFoundException(
                entity_type="Appointment",
                entity_id=appointment_id,
                message="Appointment not found",
            )
        return appointment

    async def by_email(self, email: str) -> list[Appointment]:
        """Appointments for an email (trimmed, case-insensitive), by date and time."""
        normalized = (email or "").strip().lower()
        if not normalized:
            return []
        return await self.appointment_repo.list_by_email(normalized)

    async def by_date(self, date: str) -> list[Appointment]:
        day = parse_date(date)
        if day is None:
            raise ValidationException("Invalid date format. Use YYYY-MM-DD", field="date")
        return await self.appointment_repo.list_by_date(day)

    async def lookup_upcoming(self, email: str) -> list[Appointment]:
        """Confirmed appointments from today on, for a customer looking up their bookings."""
        today = server_now(self.clock).date()
        appointments = await self.by_email(email)
        return [
            appointment
            for appointment in appointments
            if appointment.appointment_date is not None
            and appointment.appointment_date >= today
            and appointment.status == AppointmentStatus.CONFIRMED
        ]

    async def needing_action(self) -> list[Appointment]:
        """Confirmed appointments that already ended and still need completed/no-show."""
        appointments = await self.appointment_repo.list_needing_action(server_now(self.clock))
        logger.debug(f"{len(appointments)} appointments need a final status")
        return appointments
