"""
In-memory implementations of the scheduling ports.

Every async method yields to the event loop once, so concurrent tests
interleave the way they would against a real database.
"""

import asyncio
from dataclasses import replace
from datetime import UTC, date, datetime, time, timedelta

from appointment_scheduler.domains.scheduling.domain.entities import Appointment, Holiday, Service, StaffMember
from appointment_scheduler.domains.scheduling.domain.value_objects import ActiveBooking, AppointmentStatus


class FixedClock:
    """Callable clock returning a settable aware UTC instant."""

    def __init__(self, now: datetime):
        self.now = now if now.tzinfo else now.replace(tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


class InMemoryDirectory:
    """Directory backed by dictionaries."""

    def __init__(
        self,
        services: list[Service] | None = None,
        staff: list[StaffMember] | None = None,
        holidays: list[Holiday] | None = None,
    ):
        self.services = {s.id: s for s in services or []}
        self.staff = {s.id: s for s in staff or []}
        self.holidays = {h.holiday_date: h for h in holidays or []}

    async def get_service(self, service_id: str) -> Service | None:
        await asyncio.sleep(0)
        return self.services.get(service_id)

    async def list_services(self, active_only: bool = True) -> list[Service]:
        await asyncio.sleep(0)
        services = [s for s in self.services.values() if s.is_active or not active_only]
        return sorted(services, key=lambda s: (s.display_order, s.name))

    async def get_staff(self, staff_id: str) -> StaffMember | None:
        await asyncio.sleep(0)
        return self.staff.get(staff_id)

    async def list_staff(self, active_only: bool = True) -> list[StaffMember]:
        await asyncio.sleep(0)
        return [s for s in self.staff.values() if s.is_active or not active_only]

    async def get_holiday(self, holiday_date: date) -> Holiday | None:
        await asyncio.sleep(0)
        return self.holidays.get(holiday_date)


class InMemoryAppointmentRepository:
    """Appointment repository backed by a dict; returns copies like a real store."""

    def __init__(self, appointments: list[Appointment] | None = None):
        self.appointments: dict[str, Appointment] = {a.id: a for a in appointments or []}
        self.active_queries = 0

    async def create(self, appointment: Appointment) -> Appointment:
        await asyncio.sleep(0)
        self.appointments[appointment.id] = replace(appointment)
        return replace(appointment)

    async def get_by_id(self, appointment_id: str) -> Appointment | None:
        await asyncio.sleep(0)
        stored = self.appointments.get(appointment_id)
        return replace(stored) if stored else None

    async def list_by_email(self, email: str) -> list[Appointment]:
        await asyncio.sleep(0)
        found = [a for a in self.appointments.values() if a.customer_email == email]
        return [replace(a) for a in sorted(found, key=lambda a: (a.appointment_date, a.start_time))]

    async def list_by_date(self, appointment_date: date) -> list[Appointment]:
        await asyncio.sleep(0)
        found = [a for a in self.appointments.values() if a.appointment_date == appointment_date]
        return [replace(a) for a in sorted(found, key=lambda a: a.start_time)]

    async def list_active_for_date(self, appointment_date: date) -> list[ActiveBooking]:
        self.active_queries += 1
        await asyncio.sleep(0)
        return [
            a.to_active_booking()
            for a in self.appointments.values()
            if a.appointment_date == appointment_date and a.status.is_active()
        ]

    async def update_status(self, appointment_id: str, status: AppointmentStatus) -> Appointment | None:
        await asyncio.sleep(0)
        stored = self.appointments.get(appointment_id)
        if stored is None:
            return None
        stored.status = status
        stored.touch()
        return replace(stored)

    async def update_schedule(
        self,
        appointment_id: str,
        appointment_date: date,
        start_time: time,
    ) -> Appointment | None:
        await asyncio.sleep(0)
        stored = self.appointments.get(appointment_id)
        if stored is None:
            return None
        stored.appointment_date = appointment_date
        stored.start_time = start_time
        stored.touch()
        return replace(stored)

    async def find_duplicate(
        self,
        email: str,
        appointment_date: date,
        service_id: str,
        start_time: time,
        staff_id: str,
    ) -> Appointment | None:
        await asyncio.sleep(0)
        for a in self.appointments.values():
            if (
                a.customer_email == email
                and a.appointment_date == appointment_date
                and a.service_id == service_id
                and a.start_time == start_time
                and a.staff_id == staff_id
                and a.status.is_active()
            ):
                return replace(a)
        return None

    async def list_needing_action(self, now: datetime) -> list[Appointment]:
        await asyncio.sleep(0)
        found = [
            a
            for a in self.appointments.values()
            if a.status == AppointmentStatus.CONFIRMED and a.ends_at is not None and a.ends_at <= now
        ]
        return [replace(a) for a in sorted(found, key=lambda a: a.starts_at, reverse=True)]

    async def count_by_status(self) -> dict[AppointmentStatus, int]:
        await asyncio.sleep(0)
        return self._count(self.appointments.values())

    async def count_by_status_since(self, since: date) -> dict[AppointmentStatus, int]:
        await asyncio.sleep(0)
        return self._count(a for a in self.appointments.values() if a.appointment_date >= since)

    @staticmethod
    def _count(appointments) -> dict[AppointmentStatus, int]:
        counts = {status: 0 for status in AppointmentStatus}
        for a in appointments:
            counts[a.status] += 1
        return counts
