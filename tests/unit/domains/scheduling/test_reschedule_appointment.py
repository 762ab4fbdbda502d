"""
Unit tests for RescheduleAppointmentUseCase.
"""

from datetime import date, time

import pytest

from appointment_scheduler.core.domain import (
    AppointmentConflictException,
    EntityNotFoundException,
    InvalidOperationException,
    SlotLockedException,
    ValidationException,
)
from appointment_scheduler.domains.scheduling.application.services.slot_lock import slot_key
from appointment_scheduler.domains.scheduling.application.use_cases import RescheduleAppointmentUseCase
from appointment_scheduler.domains.scheduling.domain.value_objects import AppointmentStatus
from tests.utils import assert_slot_available, assert_slot_unavailable, create_appointment

MONDAY = date(2030, 1, 7)


@pytest.fixture
def use_case(directory, appointment_repo, config, slot_locks, clock):
    return RescheduleAppointmentUseCase(directory, appointment_repo, config, slot_locks, clock)


@pytest.fixture
def booked(appointment_repo):
    appointment = create_appointment(MONDAY, time(9, 0), status=AppointmentStatus.CONFIRMED)
    appointment_repo.appointments[appointment.id] = appointment
    return appointment


@pytest.mark.unit
@pytest.mark.use_case
class TestRescheduleAppointment:
    """Tests for moving appointments."""

    @pytest.mark.asyncio
    async def test_moves_to_free_slot(self, use_case, booked, appointment_repo):
        # Act
        moved = await use_case.execute(booked.id, "2030-01-08", "14:00", email="ADA@example.com")

        # Assert
        assert moved.appointment_date == date(2030, 1, 8)
        assert moved.start_time == time(14, 0)
        assert moved.status == AppointmentStatus.CONFIRMED
        assert appointment_repo.appointments[booked.id].time_str == "14:00"

    @pytest.mark.asyncio
    async def test_can_overlap_its_own_old_slot(self, use_case, booked):
        moved = await use_case.execute(booked.id, "2030-01-07", "09:30")

        assert moved.time_str == "09:30"

    @pytest.mark.asyncio
    async def test_old_slot_released_new_slot_taken(self, scheduler, booked):
        await scheduler.reschedule_appointment(booked.id, "2030-01-07", "13:00")
        slots = await scheduler.get_available_slots("2030-01-07", "svc-1", "staff-a")

        assert_slot_available(slots, "09:00")
        assert_slot_unavailable(slots, "13:00")

    @pytest.mark.asyncio
    async def test_conflict_with_other_booking(self, use_case, booked, appointment_repo):
        other = create_appointment(MONDAY, time(11, 0), customer_email="bob@example.com")
        appointment_repo.appointments[other.id] = other

        with pytest.raises(AppointmentConflictException, match="The selected time slot is not available"):
            await use_case.execute(booked.id, "2030-01-07", "11:30")

        assert appointment_repo.appointments[booked.id].time_str == "09:00"

    @pytest.mark.asyncio
    async def test_unknown_appointment(self, use_case):
        with pytest.raises(EntityNotFoundException):
            await use_case.execute("missing", "2030-01-08", "10:00")

    @pytest.mark.asyncio
    async def test_email_mismatch(self, use_case, booked):
        with pytest.raises(ValidationException, match="Email does not match this appointment"):
            await use_case.execute(booked.id, "2030-01-08", "10:00", email="eve@example.com")

    @pytest.mark.asyncio
    async def test_malformed_email_is_a_mismatch(self, use_case, booked):
        with pytest.raises(ValidationException, match="Email does not match"):
            await use_case.execute(booked.id, "2030-01-08", "10:00", email="nope")

    @pytest.mark.asyncio
    async def test_inactive_appointment(self, use_case, appointment_repo):
        cancelled = create_appointment(MONDAY, time(9, 0), status=AppointmentStatus.CANCELLED)
        appointment_repo.appointments[cancelled.id] = cancelled

        with pytest.raises(InvalidOperationException, match="Cannot reschedule a cancelled appointment"):
            await use_case.execute(cancelled.id, "2030-01-08", "10:00")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "new_date,new_time",
        [("2030-01-01", "10:00"), ("2030-01-05", "10:00"), ("2030-01-08", "10h00"), ("2030-02-04", "10:00")],
    )
    async def test_invalid_target(self, use_case, booked, new_date, new_time):
        with pytest.raises(ValidationException):
            await use_case.execute(booked.id, new_date, new_time)

    @pytest.mark.asyncio
    async def test_target_slot_locked(self, use_case, booked, slot_locks):
        slot_locks.try_acquire(slot_key("2030-01-08", "10:00", "staff-a"))

        with pytest.raises(SlotLockedException):
            await use_case.execute(booked.id, "2030-01-08", "10:00")

    @pytest.mark.asyncio
    async def test_lock_released(self, use_case, booked, slot_locks):
        await use_case.execute(booked.id, "2030-01-08", "10:00")

        assert slot_locks.held_count == 0
