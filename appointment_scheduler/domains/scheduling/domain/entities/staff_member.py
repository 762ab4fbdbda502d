"""
Staff Member Entity

A person who performs services, optionally with their own weekly shifts.
"""

from dataclasses import dataclass, field
from datetime import time

from appointment_scheduler.core.domain import Entity

from ..value_objects.business_hours import DailyHours


@dataclass
class WeeklySchedule:
    """Staff member's weekly shifts."""

    # Day of week (0=Monday, 6=Sunday) -> shift; a missing day means off
    shifts: dict[int, DailyHours] = field(default_factory=dict)

    def set_shift(self, day: int, start: str | time, end: str | time) -> None:
        self.shifts[day] = DailyHours.parse(start, end)

    def shift_for(self, day: int) -> DailyHours | None:
        return self.shifts.get(day)

    def covers(self, day: int, start: int, span: int) -> bool:
        """True when the shift for ``day`` fully contains [start, start+span]."""
        shift = self.shift_for(day)
        return shift is not None and shift.contains(start, span)


@dataclass
class StaffMember(Entity[str]):
    """
    Staff member entity.

    An empty ``service_ids`` list means the member performs every service.
    Without a schedule the member follows the full business hours.
    """

    name: str = ""
    role: str = ""
    service_ids: list[str] = field(default_factory=list)
    schedule: WeeklySchedule | None = None
    is_active: bool = True

    def can_perform(self, service_id: str) -> bool:
        return not self.service_ids or service_id in self.service_ids

    def is_working(self, weekday: int, start: int, span: int) -> bool:
        """Check whether the member's shift (if any) contains the interval."""
        if self.schedule is None:
            return True
        return self.schedule.covers(weekday, start, span)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "role": self.role,
            "service_ids": list(self.service_ids),
            "is_active": self.is_active,
            "schedule": (
                {day: str(shift) for day, shift in self.schedule.shifts.items()} if self.schedule else None
            ),
        }
