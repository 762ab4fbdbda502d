"""
Scheduler Service

Facade exposing every scheduling operation behind one object, for callers
such as a routing layer or a chat assistant.
"""

from appointment_scheduler.domains.scheduling.application.dto import (
    AppointmentStats,
    BookingRequest,
    StatusChangeResult,
)
from appointment_scheduler.domains.scheduling.application.ports import IAppointmentRepository, IDirectory
from appointment_scheduler.domains.scheduling.application.services.slot_lock import SlotLockRegistry
from appointment_scheduler.domains.scheduling.application.use_cases import (
    BookAppointmentUseCase,
    CancelAppointmentUseCase,
    GetAppointmentStatsUseCase,
    GetAppointmentsUseCase,
    GetAvailableSlotsUseCase,
    RescheduleAppointmentUseCase,
    UpdateAppointmentStatusUseCase,
)
from appointment_scheduler.domains.scheduling.domain.entities import Appointment
from appointment_scheduler.domains.scheduling.domain.services.booking_rules import Clock, utc_now
from appointment_scheduler.domains.scheduling.domain.value_objects import (
    AppointmentStatus,
    SchedulingConfig,
    TimeSlot,
)


class SchedulerService:
    """
    Scheduling facade.

    The slot lock registry must be shared by every SchedulerService of the
    process; pass the same instance when building one per request.

    Example:
        ```python
        scheduler = SchedulerService(directory, repo, config, slot_locks)
        slots = await scheduler.get_available_slots("2030-01-07", "svc-cut")
        appointment = await scheduler.book_appointment(request)
        ```
    """

    def __init__(
        self,
        directory: IDirectory,
        appointment_repository: IAppointmentRepository,
        config: SchedulingConfig,
        slot_locks: SlotLockRegistry | None = None,
        clock: Clock = utc_now,
    ):
        slot_locks = slot_locks if slot_locks is not None else SlotLockRegistry()
        self._availability = GetAvailableSlotsUseCase(directory, appointment_repository, config, clock)
        self._booking = BookAppointmentUseCase(directory, appointment_repository, config, slot_locks, clock)
        self._status = UpdateAppointmentStatusUseCase(appointment_repository, config, clock)
        self._cancel = CancelAppointmentUseCase(appointment_repository, clock)
        self._reschedule = RescheduleAppointmentUseCase(
            directory, appointment_repository, config, slot_locks, clock
        )
        self._queries = GetAppointmentsUseCase(appointment_repository, clock)
        self._stats = GetAppointmentStatsUseCase(appointment_repository, config, clock)

    async def get_available_slots(
        self,
        date: str,
        service_id: str,
        staff_id: str | None = None,
        timezone_offset: int | None = None,
    ) -> list[TimeSlot]:
        return await self._availability.execute(date, service_id, staff_id, timezone_offset)

    async def book_appointment(self, request: BookingRequest) -> Appointment:
        return await self._booking.execute(request)

    async def update_status(
        self,
        appointment_id: str,
        status: AppointmentStatus | str,
        timezone_offset: int | None = None,
    ) -> StatusChangeResult:
        return await self._status.execute(appointment_id, status, timezone_offset)

    async def cancel_appointment(self, appointment_id: str) -> Appointment:
        return await self._cancel.execute(appointment_id)

    async def reschedule_appointment(
        self,
        appointment_id: str,
        new_date: str,
        new_time: str,
        email: str | None = None,
    ) -> Appointment:
        return await self._reschedule.execute(appointment_id, new_date, new_time, email)

    async def get_appointment(self, appointment_id: str) -> Appointment:
        return await self._queries.get_by_id(appointment_id)

    async def get_appointments_by_email(self, email: str) -> list[Appointment]:
        return await self._queries.by_email(email)

    async def get_appointments_by_date(self, date: str) -> list[Appointment]:
        return await self._queries.by_date(date)

    async def lookup_upcoming(self, email: str) -> list[Appointment]:
        return await self._queries.lookup_upcoming(email)

    async def get_appointments_needing_action(self) -> list[Appointment]:
        return await self._queries.needing_action()

    async def get_appointment_stats(self) -> AppointmentStats:
        return await self._stats.execute()
