"""
Book Appointment Use Case

Validates a booking request, takes the slot lock, re-verifies availability
against a fresh snapshot and writes exactly one pending appointment.
"""

from appointment_scheduler.core.domain import (
    AppointmentConflictException,
    DuplicateBookingException,
    Email,
    EntityNotFoundException,
    PhoneNumber,
    ValidationException,
    generate_uuid_str,
)
from appointment_scheduler.core.shared.logger import get_use_case_logger
from appointment_scheduler.domains.scheduling.application.dto import BookingRequest
from appointment_scheduler.domains.scheduling.application.ports import IAppointmentRepository, IDirectory
from appointment_scheduler.domains.scheduling.application.services.slot_lock import SlotLockRegistry
from appointment_scheduler.domains.scheduling.application.use_cases.get_available_slots import (
    GetAvailableSlotsUseCase,
)
from appointment_scheduler.domains.scheduling.domain.entities import Appointment, Service, StaffMember
from appointment_scheduler.domains.scheduling.domain.services.booking_rules import (
    Clock,
    is_slot_in_past,
    server_now,
    utc_now,
    validate_booking_date,
    validate_booking_time,
)
from appointment_scheduler.domains.scheduling.domain.value_objects import (
    AppointmentStatus,
    SchedulingConfig,
)

logger = get_use_case_logger("book_appointment")

MIN_NAME_LENGTH = 2
MAX_NOTES_LENGTH = 500


class BookAppointmentUseCase:
    """
    Use case for booking appointments.

    All validation happens before the single write; the slot lock is released
    on every exit path.
    """

    def __init__(
        self,
        directory: IDirectory,
        appointment_repository: IAppointmentRepository,
        config: SchedulingConfig,
        slot_locks: SlotLockRegistry,
        clock: Clock = utc_now,
    ):
        """
        Initialize use case with dependencies.

        Args:
            directory: Services, staff and holidays
            appointment_repository: Repository for appointment data access
            config: Business hours and booking rules
            slot_locks: Registry shared by every booking path of this process
            clock: Returns the current aware UTC datetime
        """
        self.directory = directory
        self.appointment_repo = appointment_repository
        self.config = config
        self.slot_locks = slot_locks
        self.clock = clock
        self.availability = GetAvailableSlotsUseCase(directory, appointment_repository, config, clock)

    async def execute(self, request: BookingRequest) -> Appointment:
        """
        Book an appointment.

        Returns:
            The stored appointment (status pending)

        Raises:
            ValidationException: Malformed or out-of-range input
            EntityNotFoundException: Unknown service or staff member
            AppointmentConflictException: Duplicate, slot locked or slot taken
        """
        name = (request.name or "").strip()
        if len(name) < MIN_NAME_LENGTH:
            raise ValidationException("Name must be at least 2 characters", field="name")
        email = self._validate_email(request.email)
        phone = self._validate_phone(request.phone)
        notes = self._validate_notes(request.notes)

        date_str = (request.date or "").strip()
        time_str = (request.time or "").strip()
        day = validate_booking_date(date_str, server_now(self.clock).date(), self.config)
        start = validate_booking_time(time_str)

        service = await self._get_service(request.service_id)
        staff = await self._get_staff(request.staff_id, service)

        duplicate = await self.appointment_repo.find_duplicate(email, day, service.id, start, staff.id)
        if duplicate is not None:
            logger.with_context(staff_id=staff.id).warning(
                "Duplicate booking rejected", customer_email=email, date=date_str, time=time_str
            )
            raise DuplicateBookingException(staff_id=staff.id, time_slot=f"{date_str} {time_str}")

        async with self.slot_locks.hold(date_str, time_str, staff.id):
            if is_slot_in_past(day, start, server_now(self.clock)):
                raise ValidationException("Cannot book a time slot in the past", field="time")

            slots = await self.availability.execute(date_str, service.id, staff.id)
            if not any(slot.time == time_str and slot.available for slot in slots):
                logger.with_context(staff_id=staff.id).warning("Slot no longer available", date=date_str, time=time_str)
                raise AppointmentConflictException(
                    staff_id=staff.id,
                    time_slot=f"{date_str} {time_str}",
                    message="Sorry, this time slot was just booked. Please select another time.",
                )

            appointment = Appointment(
                id=generate_uuid_str(),
                customer_name=name,
                customer_email=email,
                customer_phone=phone,
                service_id=service.id,
                service_name=service.name,
                staff_id=staff.id,
                staff_name=staff.name,
                appointment_date=day,
                start_time=start,
                duration_minutes=service.duration_minutes,
                status=AppointmentStatus.PENDING,
                notes=notes,
            )
            created = await self.appointment_repo.create(appointment)

        logger.with_context(appointment_id=created.id, staff_id=staff.id).info(
            "Booked appointment", date=date_str, time=time_str
        )
        return created

    # Validation helpers

    @staticmethod
    def _validate_email(value: str) -> str:
        try:
            return Email(value).address
        except ValueError as e:
            raise ValidationException(str(e), field="email") from e

    @staticmethod
    def _validate_phone(value: str) -> str:
        try:
            return PhoneNumber(value).number
        except ValueError as e:
            raise ValidationException(str(e), field="phone") from e

    @staticmethod
    def _validate_notes(value: str | None) -> str | None:
        if value is None:
            return None
        notes = value.strip()
        if len(notes) > MAX_NOTES_LENGTH:
            raise ValidationException(f"Notes cannot exceed {MAX_NOTES_LENGTH} characters", field="notes")
        return notes or None

    async def _get_service(self, service_id: str) -> Service:
        service = await self.directory.get_service(service_id)
        if service is None:
            raise EntityNotFoundException(
                entity_type="Service",
                entity_id=service_id,
                message="Selected service not found",
            )
        return service

    async def _get_staff(self, staff_id: str, service: Service) -> StaffMember:
        if not staff_id:
            raise ValidationException("Please select a staff member", field="staff_id")
        staff = await self.directory.get_staff(staff_id)
        if staff is None:
            raise EntityNotFoundException(
                entity_type="StaffMember",
                entity_id=staff_id,
                message="Selected staff member not found",
            )
        if not staff.can_perform(service.id):
            raise ValidationException(f"{staff.name} does not offer {service.name}", field="staff_id")
        return staff
