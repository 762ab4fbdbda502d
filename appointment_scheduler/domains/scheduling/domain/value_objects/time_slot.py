"""
Time Slot Value Object
"""

from dataclasses import dataclass

from appointment_scheduler.core.domain import ValueObject

from .business_hours import TIME_24H_PATTERN


@dataclass(frozen=True)
class TimeSlot(ValueObject):
    """
    A candidate start time for a given date, service and staff scope.

    Unavailable slots are still reported so callers can render the full day.
    """

    time: str
    available: bool

    def _validate(self) -> None:
        if not TIME_24H_PATTERN.match(self.time):
            raise ValueError(f"Invalid slot time '{self.time}'")

    def to_dict(self) -> dict:
        return {"time": self.time, "available": self.available}

    def __str__(self) -> str:
        return f"{self.time} ({'available' if self.available else 'taken'})"
