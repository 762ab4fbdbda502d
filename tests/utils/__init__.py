"""Test utilities and helpers."""

from tests.utils.assertions import (
    assert_slot_available,
    assert_slot_unavailable,
    assert_slots_ordered,
    slot_map,
)
from tests.utils.builders import BookingRequestBuilder
from tests.utils.factories import (
    create_appointment,
    create_config,
    create_holiday,
    create_service,
    create_staff,
)
from tests.utils.fakes import FixedClock, InMemoryAppointmentRepository, InMemoryDirectory

__all__ = [
    # Builders
    "BookingRequestBuilder",
    # Factories
    "create_appointment",
    "create_config",
    "create_holiday",
    "create_service",
    "create_staff",
    # Fakes
    "FixedClock",
    "InMemoryAppointmentRepository",
    "InMemoryDirectory",
    # Assertions
    "assert_slot_available",
    "assert_slot_unavailable",
    "assert_slots_ordered",
    "slot_map",
]
