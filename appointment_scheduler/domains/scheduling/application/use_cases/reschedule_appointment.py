"""
Reschedule Appointment Use Case

Moves an active appointment to another date/time with the same staff member.
"""

from appointment_scheduler.core.domain import (
    AppointmentConflictException,
    Email,
    EntityNotFoundException,
    InvalidOperationException,
    ValidationException,
)
from appointment_scheduler.core.shared.logger import get_use_case_logger
from appointment_scheduler.domains.scheduling.application.ports import IAppointmentRepository, IDirectory
from appointment_scheduler.domains.scheduling.application.services.slot_lock import SlotLockRegistry
from appointment_scheduler.domains.scheduling.application.use_cases.get_available_slots import (
    GetAvailableSlotsUseCase,
)
from appointment_scheduler.domains.scheduling.domain.entities import Appointment
from appointment_scheduler.domains.scheduling.domain.services.booking_rules import (
    Clock,
    is_slot_in_past,
    server_now,
    utc_now,
    validate_booking_date,
    validate_booking_time,
)
from appointment_scheduler.domains.scheduling.domain.value_objects import SchedulingConfig

logger = get_use_case_logger("reschedule_appointment")


class RescheduleAppointmentUseCase:
    """
    Use case for moving an appointment.

    Takes the same slot lock as booking, so a reschedule and a new booking
    cannot both win the target slot. Status is never changed.
    """

    def __init__(
        self,
        directory: IDirectory,
        appointment_repository: IAppointmentRepository,
        config: SchedulingConfig,
        slot_locks: SlotLockRegistry,
        clock: Clock = utc_now,
    ):
        self.appointment_repo = appointment_repository
        self.config = config
        self.slot_locks = slot_locks
        self.clock = clock
        self.availability = GetAvailableSlotsUseCase(directory, appointment_repository, config, clock)

    async def execute(
        self,
        appointment_id: str,
        new_date: str,
        new_time: str,
        email: str | None = None,
    ) -> Appointment:
        """
        Reschedule an appointment.

        Args:
            appointment_id: Appointment to move
            new_date: ``YYYY-MM-DD``
            new_time: ``HH:MM``
            email: When given, must match the booking's email

        Raises:
            EntityNotFoundException: Unknown appointment
            ValidationException: Email mismatch or invalid date/time
            InvalidOperationException: Appointment no longer active
            AppointmentConflictException: Target slot locked or taken
        """
        appointment = await self.appointment_repo.get_by_id(appointment_id)
        if appointment is None:
            raise EntityNotFoundException(
                entity_type="Appointment",
                entity_id=appointment_id,
                message="Appointment not found",
            )

        if email is not None and not self._email_matches(email, appointment.customer_email):
            logger.with_context(appointment_id=appointment_id).warning("Reschedule refused: email mismatch")
            raise ValidationException("Email does not match this appointment", field="email")

        if not appointment.is_active():
            raise InvalidOperationException(
                operation="reschedule",
                current_state=appointment.status.value,
                message=f"Cannot reschedule a {appointment.status.value} appointment",
            )

        date_str = (new_date or "").strip()
        time_str = (new_time or "").strip()
        day = validate_booking_date(date_str, server_now(self.clock).date(), self.config)
        start = validate_booking_time(time_str)

        async with self.slot_locks.hold(date_str, time_str, appointment.staff_id):
            if is_slot_in_past(day, start, server_now(self.clock)):
                raise ValidationException("Cannot book a time slot in the past", field="time")

            slots = await self.availability.execute(
                date_str,
                appointment.service_id,
                appointment.staff_id,
                exclude_appointment_id=appointment.id,
            )
            if not any(slot.time == time_str and slot.available for slot in slots):
                raise AppointmentConflictException(
                    staff_id=appointment.staff_id,
                    time_slot=f"{date_str} {time_str}",
                    message="The selected time slot is not available. Please choose another time.",
                )

            updated = await self.appointment_repo.update_schedule(appointment.id, day, start)
            if updated is None:
                raise EntityNotFoundException(entity_type="Appointment", entity_id=appointment_id)

        logger.with_context(appointment_id=appointment_id, staff_id=updated.staff_id).info(
            "Rescheduled appointment", date=date_str, time=time_str
        )
        return updated

    @staticmethod
    def _email_matches(given: str, stored: str) -> bool:
        try:
            return Email(given).address == stored.strip().lower()
        except ValueError:
            return False
