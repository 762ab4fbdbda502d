"""
Availability Service for Scheduling Domain

Pure slot projection: given a day's window, candidate staff and one snapshot
of active bookings, decide which start times can still be booked.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime

from ..entities.holiday import Holiday
from ..entities.staff_member import StaffMember
from ..value_objects.active_booking import ActiveBooking
from ..value_objects.business_hours import DailyHours, SchedulingConfig, minutes_to_clock, minutes_to_time
from ..value_objects.time_slot import TimeSlot
from .booking_rules import is_slot_in_past
from .conflict_detector import booking_conflicts, bookings_for_staff

logger = logging.getLogger(__name__)


@dataclass
class SlotRequest:
    """Everything the projection needs for one (date, service, staff scope)."""

    day: date
    service_duration: int
    window: DailyHours
    candidates: list[StaffMember]
    bookings: list[ActiveBooking]
    # Starts at or before this instant are dropped (set only for today)
    not_before: datetime | None = None


class AvailabilityService:
    """
    Domain service computing slot availability.

    Example:
        ```python
        service = AvailabilityService(config)
        window = service.operating_window(day, holiday)
        slots = service.build_slots(SlotRequest(day, 30, window, staff, bookings))
        ```
    """

    def __init__(self, config: SchedulingConfig):
        self.config = config

    def operating_window(self, day: date, holiday: Holiday | None = None) -> DailyHours | None:
        """
        Resolve opening hours for a date.

        A holiday wins over the weekday: closed means no window, custom hours
        replace the weekday's (an inverted pair yields no window). Otherwise
        the weekday's configured hours apply.
        """
        if holiday is not None:
            if holiday.is_closed:
                return None
            if holiday.has_custom_hours():
                custom = holiday.custom_hours()
                if custom is None:
                    logger.warning(f"Holiday {holiday.holiday_date} has inverted custom hours; treating as closed")
                return custom
        return self.config.hours_for_weekday(day.weekday())

    def is_staff_free(
        self,
        staff: StaffMember,
        weekday: int,
        start: int,
        duration: int,
        bookings: list[ActiveBooking],
    ) -> bool:
        """Staff works the whole interval and no buffered booking of theirs overlaps it."""
        if not staff.is_working(weekday, start, duration):
            return False
        own = bookings_for_staff(bookings, staff.id)
        return not booking_conflicts(start, duration, own, self.config.buffer_minutes)

    def build_slots(self, request: SlotRequest) -> list[TimeSlot]:
        weekday = request.day.weekday()
        slots: list[TimeSlot] = []

        for start in request.window.slot_starts(self.config.slot_duration_minutes, request.service_duration):
            if request.not_before is not None and is_slot_in_past(
                request.day, minutes_to_clock(start), request.not_before
            ):
                continue

            available = any(
                self.is_staff_free(staff, weekday, start, request.service_duration, request.bookings)
                for staff in request.candidates
            )
            slots.append(TimeSlot(time=minutes_to_time(start), available=available))

        logger.debug(
            f"Projected {len(slots)} slots for {request.day.isoformat()} "
            f"({sum(1 for s in slots if s.available)} available, {len(request.candidates)} candidates)"
        )
        return slots
