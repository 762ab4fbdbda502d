"""
Holiday Entity
"""

from dataclasses import dataclass
from datetime import date, time

from appointment_scheduler.core.domain import Entity

from ..value_objects.business_hours import DailyHours


@dataclass
class Holiday(Entity[str]):
    """
    A calendar date that closes the business or overrides its hours.

    Custom hours apply only when both open and close are set; a pair whose
    close is not after open leaves the day without a window.
    """

    holiday_date: date | None = None
    name: str = ""
    is_closed: bool = True
    custom_open: time | None = None
    custom_close: time | None = None

    def has_custom_hours(self) -> bool:
        return self.custom_open is not None and self.custom_close is not None

    def custom_hours(self) -> DailyHours | None:
        """Override window; None when unset or when close is not after open."""
        if not self.has_custom_hours() or self.custom_close <= self.custom_open:
            return None
        return DailyHours.parse(self.custom_open, self.custom_close)
