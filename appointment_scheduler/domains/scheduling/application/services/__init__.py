"""
Scheduling Application Services

``SchedulerService`` lives in ``scheduler_service`` and is imported from
there, since it depends on the use cases which depend on the slot lock.
"""

from .slot_lock import SlotLockRegistry, slot_key

__all__ = [
    "SlotLockRegistry",
    "slot_key",
]
