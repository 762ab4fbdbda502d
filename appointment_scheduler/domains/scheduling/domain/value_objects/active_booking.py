"""
Active Booking projection

The minimal view of a pending/confirmed appointment that conflict checks need.
"""

from dataclasses import dataclass

from appointment_scheduler.core.domain import ValueObject


@dataclass(frozen=True)
class ActiveBooking(ValueObject):
    """Start, duration and staff of an appointment that still holds its slot."""

    staff_id: str
    start_minutes: int
    duration_minutes: int
    appointment_id: str | None = None

    def _validate(self) -> None:
        if self.duration_minutes <= 0:
            raise ValueError("Duration must be positive")

    @property
    def end_minutes(self) -> int:
        return self.start_minutes + self.duration_minutes
