"""
Directory Repository Implementation

SQLAlchemy implementation of IDirectory (services, staff, holidays).
"""

from datetime import date
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from appointment_scheduler.domains.scheduling.application.ports.directory import IDirectory
from appointment_scheduler.domains.scheduling.domain.entities import Holiday, Service, StaffMember, WeeklySchedule
from appointment_scheduler.domains.scheduling.domain.value_objects import WEEKDAY_NAMES
from appointment_scheduler.domains.scheduling.infrastructure.persistence.sqlalchemy.models import (
    HolidayModel,
    ServiceModel,
    StaffMemberModel,
)


def schedule_from_json(data: dict[str, Any] | None) -> WeeklySchedule | None:
    """
    Build a WeeklySchedule from ``{"monday": {"start": "09:00", "end": "13:00"}}``.

    Days with a missing or incomplete entry are treated as days off.
    """
    if data is None:
        return None

    schedule = WeeklySchedule()
    for day_index, day_name in enumerate(WEEKDAY_NAMES):
        shift = data.get(day_name)
        if not shift or not shift.get("start") or not shift.get("end"):
            continue
        schedule.set_shift(day_index, shift["start"], shift["end"])
    return schedule


class SQLAlchemyDirectoryRepository(IDirectory):
    """
    SQLAlchemy implementation of the directory port.

    Read-only: administration of these tables happens outside the engine.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_service(self, service_id: str) -> Service | None:
        result = await self.session.execute(select(ServiceModel).where(ServiceModel.id == service_id))
        model = result.scalar_one_or_none()
        return self._service_to_entity(model) if model else None

    async def list_services(self, active_only: bool = True) -> list[Service]:
        query = select(ServiceModel)
        if active_only:
            query = query.where(ServiceModel.is_active.is_(True))
        query = query.order_by(ServiceModel.display_order, ServiceModel.name)

        result = await self.session.execute(query)
        return [self._service_to_entity(m) for m in result.scalars().all()]

    async def get_staff(self, staff_id: str) -> StaffMember | None:
        result = await self.session.execute(select(StaffMemberModel).where(StaffMemberModel.id == staff_id))
        model = result.scalar_one_or_none()
        return self._staff_to_entity(model) if model else None

    async def list_staff(self, active_only: bool = True) -> list[StaffMember]:
        query = select(StaffMemberModel)
        if active_only:
            query = query.where(StaffMemberModel.is_active.is_(True))
        query = query.order_by(StaffMemberModel.name)

        result = await self.session.execute(query)
        return [self._staff_to_entity(m) for m in result.scalars().all()]

    async def get_holiday(self, holiday_date: date) -> Holiday | None:
        result = await self.session.execute(select(HolidayModel).where(HolidayModel.holiday_date == holiday_date))
        model = result.scalar_one_or_none()
        return self._holiday_to_entity(model) if model else None

    # Mapping

    def _service_to_entity(self, model: ServiceModel) -> Service:
        return Service(
            id=model.id,  # type: ignore[arg-type]
            name=model.name,  # type: ignore[arg-type]
            description=model.description,  # type: ignore[arg-type]
            duration_minutes=model.duration_minutes,  # type: ignore[arg-type]
            price=model.price,  # type: ignore[arg-type]
            is_active=model.is_active,  # type: ignore[arg-type]
            display_order=model.display_order,  # type: ignore[arg-type]
        )

    def _staff_to_entity(self, model: StaffMemberModel) -> StaffMember:
        return StaffMember(
            id=model.id,  # type: ignore[arg-type]
            name=model.name,  # type: ignore[arg-type]
            role=model.role or "",  # type: ignore[arg-type]
            service_ids=list(model.service_ids or []),
            schedule=schedule_from_json(model.schedule),  # type: ignore[arg-type]
            is_active=model.is_active,  # type: ignore[arg-type]
        )

    def _holiday_to_entity(self, model: HolidayModel) -> Holiday:
        return Holiday(
            id=model.id,  # type: ignore[arg-type]
            holiday_date=model.holiday_date,  # type: ignore[arg-type]
            name=model.name,  # type: ignore[arg-type]
            is_closed=model.is_closed,  # type: ignore[arg-type]
            custom_open=model.custom_open,  # type: ignore[arg-type]
            custom_close=model.custom_close,  # type: ignore[arg-type]
        )
