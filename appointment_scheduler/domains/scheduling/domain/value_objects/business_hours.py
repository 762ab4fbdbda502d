"""
Business Hours Value Objects

Opening windows, minute-of-day helpers and the plain scheduling configuration
consumed by the domain services.
"""

import re
from dataclasses import dataclass, field
from datetime import time

from appointment_scheduler.core.domain import ValueObject

# Index matches date.weekday() (0=Monday)
WEEKDAY_NAMES: tuple[str, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

TIME_24H_PATTERN = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")

MINUTES_PER_DAY = 24 * 60


def time_to_minutes(value: str | time) -> int:
    """Convert ``HH:MM`` (or a ``time``) to minutes since midnight."""
    if isinstance(value, time):
        return value.hour * 60 + value.minute
    match = TIME_24H_PATTERN.match(value)
    if not match:
        raise ValueError(f"Invalid time '{value}'. Use HH:MM (24-hour)")
    return int(match.group(1)) * 60 + int(match.group(2))


def minutes_to_time(minutes: int) -> str:
    """Convert minutes since midnight to ``HH:MM``."""
    hours, mins = divmod(minutes, 60)
    return f"{hours:02d}:{mins:02d}"


def minutes_to_clock(minutes: int) -> time:
    return time(minutes // 60, minutes % 60)


@dataclass(frozen=True)
class DailyHours(ValueObject):
    """
    A [open, close) window expressed in minutes since midnight.

    Used for business hours, holiday overrides and staff shifts.
    """

    open_minutes: int
    close_minutes: int

    def _validate(self) -> None:
        if not 0 <= self.open_minutes < self.close_minutes <= MINUTES_PER_DAY:
            raise ValueError(
                f"Invalid window {minutes_to_time(self.open_minutes)}-{minutes_to_time(self.close_minutes)}"
            )

    @classmethod
    def parse(cls, open_time: str | time, close_time: str | time) -> "DailyHours":
        return cls(time_to_minutes(open_time), time_to_minutes(close_time))

    def contains(self, start: int, span: int) -> bool:
        """True when [start, start+span] lies fully inside the window."""
        return self.open_minutes <= start and start + span <= self.close_minutes

    def slot_starts(self, step: int, span: int) -> list[int]:
        """Starts from open, every ``step`` minutes, while start+span fits before close."""
        starts = []
        current = self.open_minutes
        while current + span <= self.close_minutes:
            starts.append(current)
            current += step
        return starts

    def __str__(self) -> str:
        return f"{minutes_to_time(self.open_minutes)}-{minutes_to_time(self.close_minutes)}"


def _default_weekly_hours() -> dict[int, DailyHours | None]:
    hours: dict[int, DailyHours | None] = {day: DailyHours.parse("09:00", "17:00") for day in range(5)}
    hours[5] = DailyHours.parse("10:00", "14:00")
    hours[6] = None
    return hours


@dataclass
class SchedulingConfig:
    """Business rules for slot generation and booking."""

    weekly_hours: dict[int, DailyHours | None] = field(default_factory=_default_weekly_hours)
    slot_duration_minutes: int = 30
    buffer_minutes: int = 10
    max_advance_booking_days: int = 30
    default_timezone_offset_minutes: int = -300
    stats_window_days: int = 30

    def hours_for_weekday(self, weekday: int) -> DailyHours | None:
        """Configured opening window for a weekday, None when closed."""
        return self.weekly_hours.get(weekday)
