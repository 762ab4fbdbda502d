"""
Unit tests for SlotLockRegistry.
"""

import pytest

from appointment_scheduler.core.domain import AppointmentConflictException, SlotLockedException
from appointment_scheduler.domains.scheduling.application.services.slot_lock import SlotLockRegistry, slot_key


@pytest.mark.unit
class TestSlotLockRegistry:
    """Tests for the fail-fast slot lock."""

    def test_slot_key_format(self):
        assert slot_key("2030-01-07", "09:00", "staff-a") == "2030-01-07-09:00-staff-a"

    def test_try_acquire_is_exclusive(self):
        locks = SlotLockRegistry()

        assert locks.try_acquire("k")
        assert not locks.try_acquire("k")
        locks.release("k")
        assert locks.try_acquire("k")

    def test_release_unknown_key_is_noop(self):
        locks = SlotLockRegistry()

        locks.release("never-held")

        assert locks.held_count == 0

    @pytest.mark.asyncio
    async def test_hold_releases_on_exit(self):
        locks = SlotLockRegistry()

        async with locks.hold("2030-01-07", "09:00", "staff-a") as key:
            assert locks.is_held(key)

        assert locks.held_count == 0

    @pytest.mark.asyncio
    async def test_hold_releases_on_error(self):
        locks = SlotLockRegistry()

        with pytest.raises(RuntimeError):
            async with locks.hold("2030-01-07", "09:00", "staff-a"):
                raise RuntimeError("boom")

        assert locks.held_count == 0

    @pytest.mark.asyncio
    async def test_nested_hold_fails_fast(self):
        locks = SlotLockRegistry()

        async with locks.hold("2030-01-07", "09:00", "staff-a") as key:
            with pytest.raises(SlotLockedException) as exc_info:
                async with locks.hold("2030-01-07", "09:00", "staff-a"):
                    pass
            # Failed attempt leaves the outer holder's key in place
            assert locks.is_held(key)

        assert isinstance(exc_info.value, AppointmentConflictException)
        assert exc_info.value.code == "SLOT_LOCKED"
        assert locks.held_count == 0

    @pytest.mark.asyncio
    async def test_other_staff_not_blocked(self):
        locks = SlotLockRegistry()

        async with locks.hold("2030-01-07", "09:00", "staff-a"):
            async with locks.hold("2030-01-07", "09:00", "staff-b"):
                assert locks.held_count == 2

    @pytest.mark.asyncio
    async def test_overlapping_starts_take_separate_locks(self):
        # Exact-start keys: overlap between 09:00 and 09:30 is caught by re-verification, not the lock
        locks = SlotLockRegistry()

        async with locks.hold("2030-01-07", "09:00", "staff-a"):
            async with locks.hold("2030-01-07", "09:30", "staff-a") as key:
                assert key == "2030-01-07-09:30-staff-a"
                assert locks.held_count == 2
