"""
Scheduling Container.

Single Responsibility: Wire all scheduling dependencies.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from appointment_scheduler.config.settings import Settings, get_settings
from appointment_scheduler.core.shared.logger import configure_logging_from_settings
from appointment_scheduler.domains.scheduling.application.services.scheduler_service import SchedulerService
from appointment_scheduler.domains.scheduling.application.services.slot_lock import SlotLockRegistry
from appointment_scheduler.domains.scheduling.application.use_cases import (
    BookAppointmentUseCase,
    GetAvailableSlotsUseCase,
    UpdateAppointmentStatusUseCase,
)
from appointment_scheduler.domains.scheduling.domain.value_objects import SchedulingConfig
from appointment_scheduler.domains.scheduling.infrastructure.repositories import (
    SQLAlchemyAppointmentRepository,
    SQLAlchemyDirectoryRepository,
)

logger = logging.getLogger(__name__)


class SchedulingContainer:
    """
    Scheduling container.

    Holds process-wide singletons (configuration, slot lock registry) and
    builds session-scoped repositories and use cases on demand.
    """

    def __init__(self, settings: Settings | None = None):
        """
        Initialize scheduling container.

        Args:
            settings: Optional settings (defaults to the cached application settings)
        """
        self.settings = settings or get_settings()
        self._config: SchedulingConfig | None = None
        self._slot_locks = SlotLockRegistry()

        logger.info(f"SchedulingContainer initialized for {self.settings.PROJECT_NAME} {self.settings.VERSION}")

    @property
    def config(self) -> SchedulingConfig:
        if self._config is None:
            self._config = self.settings.scheduling_config
        return self._config

    @property
    def slot_locks(self) -> SlotLockRegistry:
        return self._slot_locks

    # ==================== REPOSITORIES ====================

    def create_appointment_repository(self, db: AsyncSession) -> SQLAlchemyAppointmentRepository:
        """Create Appointment Repository."""
        return SQLAlchemyAppointmentRepository(session=db)

    def create_directory_repository(self, db: AsyncSession) -> SQLAlchemyDirectoryRepository:
        """Create Directory Repository."""
        return SQLAlchemyDirectoryRepository(session=db)

    # ==================== USE CASES ====================

    def create_get_available_slots_use_case(self, db: AsyncSession) -> GetAvailableSlotsUseCase:
        return GetAvailableSlotsUseCase(
            directory=self.create_directory_repository(db),
            appointment_repository=self.create_appointment_repository(db),
            config=self.config,
        )

    def create_book_appointment_use_case(self, db: AsyncSession) -> BookAppointmentUseCase:
        """Create BookAppointmentUseCase sharing the process-wide slot locks."""
        return BookAppointmentUseCase(
            directory=self.create_directory_repository(db),
            appointment_repository=self.create_appointment_repository(db),
            config=self.config,
            slot_locks=self._slot_locks,
        )

    def create_update_status_use_case(self, db: AsyncSession) -> UpdateAppointmentStatusUseCase:
        return UpdateAppointmentStatusUseCase(
            appointment_repository=self.create_appointment_repository(db),
            config=self.config,
        )

    def create_scheduler_service(self, db: AsyncSession) -> SchedulerService:
        """Create the scheduling facade bound to one session."""
        return SchedulerService(
            directory=self.create_directory_repository(db),
            appointment_repository=self.create_appointment_repository(db),
            config=self.config,
            slot_locks=self._slot_locks,
        )


_container: SchedulingContainer | None = None


def get_container() -> SchedulingContainer:
    """
    Process-wide container (one slot lock registry per process).

    The first call also configures logging from settings.
    """
    global _container
    if _container is None:
        settings = get_settings()
        configure_logging_from_settings(settings)
        _container = SchedulingContainer(settings)
    return _container
