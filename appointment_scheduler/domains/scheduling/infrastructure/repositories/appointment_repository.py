"""
Appointment Repository Implementation

SQLAlchemy implementation of IAppointmentRepository.
"""

from datetime import date, datetime, time

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from appointment_scheduler.core.shared.logger import get_repository_logger
from appointment_scheduler.domains.scheduling.application.ports.appointment_repository import (
    IAppointmentRepository,
)
from appointment_scheduler.domains.scheduling.domain.entities import Appointment
from appointment_scheduler.domains.scheduling.domain.value_objects import (
    ACTIVE_STATUSES,
    ActiveBooking,
    AppointmentStatus,
    time_to_minutes,
)
from appointment_scheduler.domains.scheduling.infrastructure.persistence.sqlalchemy.models import AppointmentModel

logger = get_repository_logger("appointments")

_ACTIVE_VALUES = [status.value for status in ACTIVE_STATUSES]


class SQLAlchemyAppointmentRepository(IAppointmentRepository):
    """
    SQLAlchemy implementation of appointment repository.

    Each mutation commits immediately; the session is owned by the caller.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(self, appointment: Appointment) -> Appointment:
        """Insert a new appointment."""
        model = self._to_model(appointment)
        self.session.add(model)
        await self.session.commit()
        await self.session.refresh(model)
        logger.debug("Inserted appointment", appointment_id=model.id)
        return self._to_entity(model)

    async def get_by_id(self, appointment_id: str) -> Appointment | None:
        """Find appointment by ID."""
        model = await self._get_model(appointment_id)
        return self._to_entity(model) if model else None

    async def list_by_email(self, email: str) -> list[Appointment]:
        result = await self.session.execute(
            select(AppointmentModel)
            .where(AppointmentModel.customer_email == email)
            .order_by(AppointmentModel.appointment_date, AppointmentModel.start_time)
        )
        return [self._to_entity(m) for m in result.scalars().all()]

    async def list_by_date(self, appointment_date: date) -> list[Appointment]:
        result = await self.session.execute(
            select(AppointmentModel)
            .where(AppointmentModel.appointment_date == appointment_date)
            .order_by(AppointmentModel.start_time)
        )
        return [self._to_entity(m) for m in result.scalars().all()]

    async def list_active_for_date(self, appointment_date: date) -> list[ActiveBooking]:
        """One query for every pending/confirmed appointment on the date."""
        result = await self.session.execute(
            select(
                AppointmentModel.id,
                AppointmentModel.staff_id,
                AppointmentModel.start_time,
                AppointmentModel.duration_minutes,
            ).where(
                AppointmentModel.appointment_date == appointment_date,
                AppointmentModel.status.in_(_ACTIVE_VALUES),
            )
        )
        return [
            ActiveBooking(
                staff_id=row.staff_id,
                start_minutes=time_to_minutes(row.start_time),
                duration_minutes=row.duration_minutes,
                appointment_id=row.id,
            )
            for row in result.all()
        ]

    async def update_status(self, appointment_id: str, status: AppointmentStatus) -> Appointment | None:
        model = await self._get_model(appointment_id)
        if model is None:
            return None

        model.status = status.value
        await self.session.commit()
        await self.session.refresh(model)
        return self._to_entity(model)

    async def update_schedule(
        self,
        appointment_id: str,
        appointment_date: date,
        start_time: time,
    ) -> Appointment | None:
        model = await self._get_model(appointment_id)
        if model is None:
            return None

        model.appointment_date = appointment_date
        model.start_time = start_time
        await self.session.commit()
        await self.session.refresh(model)
        return self._to_entity(model)

    async def find_duplicate(
        self,
        email: str,
        appointment_date: date,
        service_id: str,
        start_time: time,
        staff_id: str,
    ) -> Appointment | None:
        result = await self.session.execute(
            select(AppointmentModel)
            .where(
                AppointmentModel.customer_email == email,
                AppointmentModel.appointment_date == appointment_date,
                AppointmentModel.service_id == service_id,
                AppointmentModel.start_time == start_time,
                AppointmentModel.staff_id == staff_id,
                AppointmentModel.status.in_(_ACTIVE_VALUES),
            )
            .limit(1)
        )
        model = result.scalars().first()
        return self._to_entity(model) if model else None

    async def list_needing_action(self, now: datetime) -> list[Appointment]:
        """Confirmed appointments ended at or before ``now``, newest first."""
        result = await self.session.execute(
            select(AppointmentModel)
            .where(
                AppointmentModel.status == AppointmentStatus.CONFIRMED.value,
                AppointmentModel.appointment_date <= now.date(),
            )
            .order_by(AppointmentModel.appointment_date.desc(), AppointmentModel.start_time.desc())
        )
        appointments = [self._to_entity(m) for m in result.scalars().all()]
        # End time depends on the per-row duration
        return [a for a in appointments if a.ends_at is not None and a.ends_at <= now]

    async def count_by_status(self) -> dict[AppointmentStatus, int]:
        result = await self.session.execute(
            select(AppointmentModel.status, func.count(AppointmentModel.id)).group_by(AppointmentModel.status)
        )
        return self._to_counts(result.all())

    async def count_by_status_since(self, since: date) -> dict[AppointmentStatus, int]:
        result = await self.session.execute(
            select(AppointmentModel.status, func.count(AppointmentModel.id))
            .where(AppointmentModel.appointment_date >= since)
            .group_by(AppointmentModel.status)
        )
        return self._to_counts(result.all())

    # Helpers

    async def _get_model(self, appointment_id: str) -> AppointmentModel | None:
        result = await self.session.execute(select(AppointmentModel).where(AppointmentModel.id == appointment_id))
        return result.scalar_one_or_none()

    @staticmethod
    def _to_counts(rows) -> dict[AppointmentStatus, int]:
        counts = {status: 0 for status in AppointmentStatus}
        for status_value, count in rows:
            try:
                counts[AppointmentStatus(status_value)] = int(count)
            except ValueError:
                logger.warning("Ignoring unknown appointment status in counts", status=status_value)
        return counts

    def _to_entity(self, model: AppointmentModel) -> Appointment:
        """Convert model to entity."""
        return Appointment(
            id=model.id,  # type: ignore[arg-type]
            customer_name=model.customer_name,  # type: ignore[arg-type]
            customer_email=model.customer_email,  # type: ignore[arg-type]
            customer_phone=model.customer_phone,  # type: ignore[arg-type]
            service_id=model.service_id,  # type: ignore[arg-type]
            service_name=model.service_name,  # type: ignore[arg-type]
            staff_id=model.staff_id,  # type: ignore[arg-type]
            staff_name=model.staff_name,  # type: ignore[arg-type]
            appointment_date=model.appointment_date,  # type: ignore[arg-type]
            start_time=model.start_time,  # type: ignore[arg-type]
            duration_minutes=model.duration_minutes,  # type: ignore[arg-type]
            status=AppointmentStatus(model.status),
            notes=model.notes,  # type: ignore[arg-type]
            created_at=model.created_at,  # type: ignore[arg-type]
            updated_at=model.updated_at,  # type: ignore[arg-type]
        )

    def _to_model(self, appointment: Appointment) -> AppointmentModel:
        """Convert entity to model."""
        return AppointmentModel(
            id=appointment.id,
            customer_name=appointment.customer_name,
            customer_email=appointment.customer_email,
            customer_phone=appointment.customer_phone,
            service_id=appointment.service_id,
            service_name=appointment.service_name,
            staff_id=appointment.staff_id,
            staff_name=appointment.staff_name,
            appointment_date=appointment.appointment_date,
            start_time=appointment.start_time,
            duration_minutes=appointment.duration_minutes,
            status=appointment.status.value,
            notes=appointment.notes,
            created_at=appointment.created_at,
            updated_at=appointment.updated_at,
        )
