"""
Cancel Appointment Use Case
"""

from appointment_scheduler.core.domain import EntityNotFoundException, StatusTimeGuardException
from appointment_scheduler.core.shared.logger import get_use_case_logger
from appointment_scheduler.domains.scheduling.application.ports import IAppointmentRepository
from appointment_scheduler.domains.scheduling.domain.entities import Appointment
from appointment_scheduler.domains.scheduling.domain.services.booking_rules import Clock, server_now, utc_now
from appointment_scheduler.domains.scheduling.domain.value_objects import AppointmentStatus

logger = get_use_case_logger("cancel_appointment")


class CancelAppointmentUseCase:
    """
    Cancel an appointment that has not started yet.

    Past appointments are judged against the server clock; terminal
    appointments are refused by the lifecycle table.
    """

    def __init__(self, appointment_repository: IAppointmentRepository, clock: Clock = utc_now):
        self.appointment_repo = appointment_repository
        self.clock = clock

    async def execute(self, appointment_id: str) -> Appointment:
        """
        Raises:
            EntityNotFoundException: Unknown appointment
            StatusTimeGuardException: Scheduled start already passed
            InvalidStatusTransitionException: Appointment already terminal
        """
        appointment = await self.appointment_repo.get_by_id(appointment_id)
        if appointment is None:
            raise EntityNotFoundException(
                entity_type="Appointment",
                entity_id=appointment_id,
                message="Appointment not found",
            )

        if appointment.starts_at is not None and appointment.starts_at < server_now(self.clock):
            logger.with_context(appointment_id=appointment_id).warning("Refusing to cancel past appointment")
            raise StatusTimeGuardException(
                current_status=appointment.status.value,
                requested_status=AppointmentStatus.CANCELLED.value,
                message="Cannot cancel past appointments",
            )

        appointment.change_status(AppointmentStatus.CANCELLED)

        updated = await self.appointment_repo.update_status(appointment_id, AppointmentStatus.CANCELLED)
        if updated is None:
            raise EntityNotFoundException(entity_type="Appointment", entity_id=appointment_id)

        logger.with_context(appointment_id=appointment_id, staff_id=updated.staff_id).info("Cancelled appointment")
        return updated
