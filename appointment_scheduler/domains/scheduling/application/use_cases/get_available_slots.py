"""
Get Available Slots Use Case

Projects bookable start times for a date, service and optional staff member.
"""

import logging

from appointment_scheduler.domains.scheduling.application.ports import IAppointmentRepository, IDirectory
from appointment_scheduler.domains.scheduling.domain.entities import StaffMember
from appointment_scheduler.domains.scheduling.domain.services.availability_service import (
    AvailabilityService,
    SlotRequest,
)
from appointment_scheduler.domains.scheduling.domain.services.booking_rules import (
    Clock,
    caller_now,
    is_beyond_horizon,
    is_date_in_past,
    parse_date,
    server_now,
    utc_now,
)
from appointment_scheduler.domains.scheduling.domain.value_objects import SchedulingConfig, TimeSlot

logger = logging.getLogger(__name__)


class GetAvailableSlotsUseCase:
    """
    Use case for availability queries.

    Every "nothing to offer" situation (bad date, unknown service, closed day,
    no candidate staff) yields an empty list rather than an error.
    """

    def __init__(
        self,
        directory: IDirectory,
        appointment_repository: IAppointmentRepository,
        config: SchedulingConfig,
        clock: Clock = utc_now,
    ):
        self.directory = directory
        self.appointment_repo = appointment_repository
        self.config = config
        self.clock = clock
        self.availability = AvailabilityService(config)

    async def execute(
        self,
        date: str,
        service_id: str,
        staff_id: str | None = None,
        timezone_offset: int | None = None,
        exclude_appointment_id: str | None = None,
    ) -> list[TimeSlot]:
        """
        Compute the slot list.

        Args:
            date: ``YYYY-MM-DD``
            service_id: Service to book
            staff_id: Restrict to one staff member (any qualified staff when None)
            timezone_offset: Caller's offset in minutes, used to hide today's past starts
            exclude_appointment_id: Ignore this appointment's own booking (rescheduling)

        Returns:
            Ordered slots covering the whole operating window
        """
        day = parse_date(date)
        if day is None:
            logger.debug(f"Availability requested for malformed date {date!r}")
            return []

        today = server_now(self.clock).date()
        if is_date_in_past(day, today) or is_beyond_horizon(day, today, self.config.max_advance_booking_days):
            return []

        service = await self.directory.get_service(service_id)
        if service is None:
            return []

        holiday = await self.directory.get_holiday(day)
        window = self.availability.operating_window(day, holiday)
        if window is None:
            return []

        candidates = await self._candidates(service_id, staff_id)
        if not candidates:
            return []

        bookings = await self.appointment_repo.list_active_for_date(day)
        if exclude_appointment_id:
            bookings = [b for b in bookings if b.appointment_id != exclude_appointment_id]

        not_before = caller_now(self.clock, timezone_offset) if day == today else None

        return self.availability.build_slots(
            SlotRequest(
                day=day,
                service_duration=service.duration_minutes,
                window=window,
                candidates=candidates,
                bookings=bookings,
                not_before=not_before,
            )
        )

    async def _candidates(self, service_id: str, staff_id: str | None) -> list[StaffMember]:
        if staff_id:
            staff = await self.directory.get_staff(staff_id)
            return [staff] if staff is not None else []

        staff_members = await self.directory.list_staff(active_only=True)
        return [staff for staff in staff_members if staff.is_active and staff.can_perform(service_id)]
