"""
Unit tests for CancelAppointmentUseCase.
"""

from datetime import date, time

import pytest

from appointment_scheduler.core.domain import (
    EntityNotFoundException,
    InvalidStatusTransitionException,
    StatusTimeGuardException,
)
from appointment_scheduler.domains.scheduling.application.use_cases import CancelAppointmentUseCase
from appointment_scheduler.domains.scheduling.domain.value_objects import AppointmentStatus
from tests.utils import assert_slot_available, create_appointment


@pytest.fixture
def use_case(appointment_repo, clock):
    return CancelAppointmentUseCase(appointment_repo, clock)


@pytest.mark.unit
@pytest.mark.use_case
class TestCancelAppointment:
    """Tests for cancellation."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [AppointmentStatus.PENDING, AppointmentStatus.CONFIRMED])
    async def test_cancels_future_active_appointment(self, use_case, appointment_repo, status):
        # Arrange
        appointment = create_appointment(date(2030, 1, 7), time(9, 0), status=status)
        appointment_repo.appointments[appointment.id] = appointment

        # Act
        cancelled = await use_case.execute(appointment.id)

        # Assert
        assert cancelled.status == AppointmentStatus.CANCELLED
        assert appointment_repo.appointments[appointment.id].status == AppointmentStatus.CANCELLED

    @pytest.mark.asyncio
    async def test_cancel_frees_the_slot(self, scheduler, appointment_repo):
        appointment = create_appointment(date(2030, 1, 7), time(9, 0))
        appointment_repo.appointments[appointment.id] = appointment

        await scheduler.cancel_appointment(appointment.id)
        slots = await scheduler.get_available_slots("2030-01-07", "svc-1", "staff-a")

        assert_slot_available(slots, "09:00")

    @pytest.mark.asyncio
    async def test_unknown_appointment(self, use_case):
        with pytest.raises(EntityNotFoundException, match="Appointment not found"):
            await use_case.execute("missing")

    @pytest.mark.asyncio
    async def test_past_appointment_refused(self, use_case, appointment_repo):
        # Clock is 2030-01-02 12:00
        appointment = create_appointment(date(2030, 1, 2), time(11, 30))
        appointment_repo.appointments[appointment.id] = appointment

        with pytest.raises(StatusTimeGuardException, match="Cannot cancel past appointments"):
            await use_case.execute(appointment.id)

        assert appointment_repo.appointments[appointment.id].status == AppointmentStatus.PENDING

    @pytest.mark.asyncio
    async def test_appointment_starting_now_can_still_be_cancelled(self, use_case, appointment_repo):
        appointment = create_appointment(date(2030, 1, 2), time(12, 0))
        appointment_repo.appointments[appointment.id] = appointment

        cancelled = await use_case.execute(appointment.id)

        assert cancelled.status == AppointmentStatus.CANCELLED

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "status",
        [AppointmentStatus.CANCELLED, AppointmentStatus.COMPLETED, AppointmentStatus.NO_SHOW],
    )
    async def test_terminal_appointment_refused(self, use_case, appointment_repo, status):
        appointment = create_appointment(date(2030, 1, 7), time(9, 0), status=status)
        appointment_repo.appointments[appointment.id] = appointment

        with pytest.raises(InvalidStatusTransitionException):
            await use_case.execute(appointment.id)

        assert appointment_repo.appointments[appointment.id].status == status
