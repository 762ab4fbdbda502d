"""
Custom assertions and verification helpers for tests.

Provides reusable assertion functions for common scheduling checks.
"""

from appointment_scheduler.domains.scheduling.domain.value_objects import TimeSlot


def slot_map(slots: list[TimeSlot]) -> dict[str, bool]:
    """Map ``HH:MM`` -> available."""
    return {slot.time: slot.available for slot in slots}


def assert_slot_available(slots: list[TimeSlot], time: str) -> None:
    """
    Assert that a slot is present and available.

    Raises:
        AssertionError: If the slot is missing or taken
    """
    slots_by_time = slot_map(slots)
    assert time in slots_by_time, f"Slot {time} missing from {list(slots_by_time)}"
    assert slots_by_time[time], f"Slot {time} should be available"


def assert_slot_unavailable(slots: list[TimeSlot], time: str) -> None:
    """Assert that a slot is present but taken."""
    slots_by_time = slot_map(slots)
    assert time in slots_by_time, f"Slot {time} missing from {list(slots_by_time)}"
    assert not slots_by_time[time], f"Slot {time} should be unavailable"


def assert_slots_ordered(slots: list[TimeSlot]) -> None:
    times = [slot.time for slot in slots]
    assert times == sorted(times), "Slots must be in ascending time order"
    assert len(times) == len(set(times)), "Slots must be unique"
