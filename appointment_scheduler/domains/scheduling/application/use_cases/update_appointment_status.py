"""
Update Appointment Status Use Case

Applies lifecycle transitions and the elapsed-start time guard.
"""

from appointment_scheduler.core.domain import (
    DomainException,
    EntityNotFoundException,
    StatusTimeGuardException,
    ValidationException,
)
from appointment_scheduler.core.shared.logger import get_use_case_logger
from appointment_scheduler.domains.scheduling.application.dto import StatusChangeResult
from appointment_scheduler.domains.scheduling.application.ports import IAppointmentRepository
from appointment_scheduler.domains.scheduling.domain.entities import Appointment
from appointment_scheduler.domains.scheduling.domain.services.booking_rules import Clock, shifted_now, utc_now
from appointment_scheduler.domains.scheduling.domain.value_objects import AppointmentStatus, SchedulingConfig

logger = get_use_case_logger("update_appointment_status")


class UpdateAppointmentStatusUseCase:
    """
    Use case for status changes.

    Failures are reported in the result instead of raised; repository
    errors still propagate.
    """

    def __init__(
        self,
        appointment_repository: IAppointmentRepository,
        config: SchedulingConfig,
        clock: Clock = utc_now,
    ):
        self.appointment_repo = appointment_repository
        self.config = config
        self.clock = clock

    async def execute(
        self,
        appointment_id: str,
        status: AppointmentStatus | str,
        timezone_offset: int | None = None,
    ) -> StatusChangeResult:
        """
        Change an appointment's status.

        Args:
            appointment_id: Appointment to update
            status: Requested status
            timezone_offset: Caller's offset in minutes (configured default when None)

        Returns:
            StatusChangeResult with the updated appointment on success
        """
        try:
            appointment = await self._apply(appointment_id, status, timezone_offset)
        except DomainException as e:
            logger.with_context(appointment_id=appointment_id).warning(
                "Status change rejected", error=e.message, error_code=e.code
            )
            return StatusChangeResult(success=False, error=e.message, error_code=e.code)

        logger.with_context(appointment_id=appointment_id, staff_id=appointment.staff_id).info(
            "Appointment status changed", status=appointment.status.value
        )
        return StatusChangeResult(success=True, appointment=appointment)

    async def _apply(
        self,
        appointment_id: str,
        status: AppointmentStatus | str,
        timezone_offset: int | None,
    ) -> Appointment:
        new_status = self._parse_status(status)

        appointment = await self.appointment_repo.get_by_id(appointment_id)
        if appointment is None:
            raise EntityNotFoundException(
                entity_type="Appointment",
                entity_id=appointment_id,
                message="Appointment not found",
            )

        current = appointment.status
        # Raises InvalidStatusTransitionException
        appointment.change_status(new_status)

        if new_status.requires_elapsed_start():
            offset = self.config.default_timezone_offset_minutes if timezone_offset is None else timezone_offset
            client_now = shifted_now(self.clock, offset)
            if appointment.starts_at is not None and appointment.starts_at > client_now:
                raise StatusTimeGuardException(
                    current_status=current.value,
                    requested_status=new_status.value,
                    message=(
                        f"Cannot mark as {new_status.value}. Appointment is scheduled for "
                        f"{appointment.appointment_date.isoformat()} at {appointment.time_str}. "
                        "You can only cancel future appointments."
                    ),
                )

        updated = await self.appointment_repo.update_status(appointment_id, new_status)
        if updated is None:
            raise EntityNotFoundException(
                entity_type="Appointment",
                entity_id=appointment_id,
                message="Appointment not found",
            )
        return updated

    @staticmethod
    def _parse_status(status: AppointmentStatus | str) -> AppointmentStatus:
        if isinstance(status, AppointmentStatus):
            return status
        try:
            return AppointmentStatus.from_string(status)
        except ValueError as e:
            raise ValidationException(
                f"Invalid status '{status}'. Valid statuses: {', '.join(AppointmentStatus.values())}",
                field="status",
            ) from e
