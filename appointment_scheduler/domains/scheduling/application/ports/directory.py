"""
Directory Port

Read-only access to services, staff members and holidays.
"""

from datetime import date
from typing import Protocol, runtime_checkable

from appointment_scheduler.domains.scheduling.domain.entities import Holiday, Service, StaffMember


@runtime_checkable
class IDirectory(Protocol):
    """
    Directory interface.

    The scheduling engine never mutates directory data; administration of
    services, staff and holidays lives elsewhere.
    """

    async def get_service(self, service_id: str) -> Service | None:
        """
        Find service by ID.

        Args:
            service_id: Service identifier

        Returns:
            Service if found, None otherwise
        """
        ...

    async def list_services(self, active_only: bool = True) -> list[Service]:
        """List services ordered by display order."""
        ...

    async def get_staff(self, staff_id: str) -> StaffMember | None:
        """
        Find staff member by ID (active or not).

        Args:
            staff_id: Staff identifier

        Returns:
            StaffMember if found, None otherwise
        """
        ...

    async def list_staff(self, active_only: bool = True) -> list[StaffMember]:
        """List staff members."""
        ...

    async def get_holiday(self, holiday_date: date) -> Holiday | None:
        """Holiday for an exact date, if any."""
        ...
