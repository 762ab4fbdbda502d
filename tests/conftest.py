"""
Shared pytest fixtures for all tests.

This module provides common fixtures for mock database sessions, in-memory
ports, a fixed clock and scheduling configuration.
"""

import os
import time
from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from appointment_scheduler.domains.scheduling.application.services.scheduler_service import SchedulerService
from appointment_scheduler.domains.scheduling.application.services.slot_lock import SlotLockRegistry
from tests.utils import (
    FixedClock,
    InMemoryAppointmentRepository,
    InMemoryDirectory,
    create_config,
    create_service,
    create_staff,
)

# Ensure test environment
os.environ["ENVIRONMENT"] = "test"

# Wall-clock helpers use the server's local zone; pin it so dates are deterministic
os.environ["TZ"] = "UTC"
if hasattr(time, "tzset"):
    time.tzset()


# ============================================================================
# DATABASE FIXTURES
# ============================================================================


@pytest.fixture
def mock_async_session():
    """Create a mock async database session."""
    session = AsyncMock(spec=AsyncSession)
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.refresh = AsyncMock()
    session.add = MagicMock()
    return session


# ============================================================================
# SCHEDULING FIXTURES
# ============================================================================


@pytest.fixture
def clock() -> FixedClock:
    """Wednesday 2030-01-02 12:00 UTC."""
    return FixedClock(datetime(2030, 1, 2, 12, 0, tzinfo=UTC))


@pytest.fixture
def config():
    """Weekdays 09:00-17:00, 30 min slots, 10 min buffer, 30 day horizon."""
    return create_config()


@pytest.fixture
def service():
    return create_service("svc-1", duration_minutes=60, name="Consultation")


@pytest.fixture
def staff_a():
    return create_staff("staff-a", name="Alex")


@pytest.fixture
def staff_b():
    return create_staff("staff-b", name="Blake")


@pytest.fixture
def directory(service, staff_a):
    return InMemoryDirectory(services=[service], staff=[staff_a])


@pytest.fixture
def appointment_repo():
    return InMemoryAppointmentRepository()


@pytest.fixture
def slot_locks():
    return SlotLockRegistry()


@pytest.fixture
def scheduler(directory, appointment_repo, config, slot_locks, clock):
    """Scheduler facade wired to in-memory ports."""
    return SchedulerService(directory, appointment_repo, config, slot_locks, clock)


# ============================================================================
# ENVIRONMENT FIXTURES
# ============================================================================


@pytest.fixture
def test_env_vars(monkeypatch):
    """Set test environment variables."""
    env_vars = {
        "ENVIRONMENT": "test",
        "DB_NAME": "appointments_test",
        "LOG_LEVEL": "DEBUG",
    }

    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)

    return env_vars
