"""
Slot Lock Registry

Process-local, fail-fast exclusion per (date, time, staff) slot. A second
booking attempt for a slot that is already being booked is rejected
immediately instead of waiting.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from appointment_scheduler.core.domain import SlotLockedException

logger = logging.getLogger(__name__)


def slot_key(date_str: str, time_str: str, staff_id: str) -> str:
    return f"{date_str}-{time_str}-{staff_id}"


class SlotLockRegistry:
    """
    Set of slot keys currently held by in-flight bookings.

    Check-and-insert runs without an await in between, so it is atomic on a
    single event loop. Only guards one process.

    Keys are exact start times, so overlapping requests with different
    starts for the same staff member (09:00 and 09:30 for a 60 minute
    service) take different locks and can both pass re-verification before
    either writes. Closing that gap needs a per-staff lock or a database
    exclusion constraint.
    """

    def __init__(self) -> None:
        self._held: set[str] = set()

    def is_held(self, key: str) -> bool:
        return key in self._held

    def try_acquire(self, key: str) -> bool:
        if key in self._held:
            return False
        self._held.add(key)
        return True

    def release(self, key: str) -> None:
        self._held.discard(key)

    @property
    def held_count(self) -> int:
        return len(self._held)

    @asynccontextmanager
    async def hold(self, date_str: str, time_str: str, staff_id: str) -> AsyncIterator[str]:
        """
        Hold the slot lock for the duration of the block.

        Raises:
            SlotLockedException: Another booking already holds the slot
        """
        key = slot_key(date_str, time_str, staff_id)
        if not self.try_acquire(key):
            logger.warning(f"Slot lock busy: {key}")
            raise SlotLockedException(staff_id=staff_id, time_slot=f"{date_str} {time_str}")
        try:
            yield key
        finally:
            self.release(key)
