"""
Get Appointment Stats Use Case
"""

import math
from datetime import timedelta

from appointment_scheduler.domains.scheduling.application.dto import AppointmentStats
from appointment_scheduler.domains.scheduling.application.ports import IAppointmentRepository
from appointment_scheduler.domains.scheduling.domain.services.booking_rules import Clock, server_now, utc_now
from appointment_scheduler.domains.scheduling.domain.value_objects import AppointmentStatus, SchedulingConfig


def no_show_rate(completed: int, no_show: int) -> int:
    """Percentage of no-shows among finished appointments, rounded half up."""
    finished = completed + no_show
    if finished == 0:
        return 0
    return math.floor(no_show * 100 / finished + 0.5)


class GetAppointmentStatsUseCase:
    """All-time totals per status and the no-show rate over the recent window."""

    def __init__(
        self,
        appointment_repository: IAppointmentRepository,
        config: SchedulingConfig,
        clock: Clock = utc_now,
    ):
        self.appointment_repo = appointment_repository
        self.config = config
        self.clock = clock

    async def execute(self) -> AppointmentStats:
        totals = await self.appointment_repo.count_by_status()

        since = server_now(self.clock).date() - timedelta(days=self.config.stats_window_days)
        recent = await self.appointment_repo.count_by_status_since(since)

        return AppointmentStats(
            total=sum(totals.values()),
            pending=totals.get(AppointmentStatus.PENDING, 0),
            confirmed=totals.get(AppointmentStatus.CONFIRMED, 0),
            completed=totals.get(AppointmentStatus.COMPLETED, 0),
            cancelled=totals.get(AppointmentStatus.CANCELLED, 0),
            no_show=totals.get(AppointmentStatus.NO_SHOW, 0),
            no_show_rate=no_show_rate(
                recent.get(AppointmentStatus.COMPLETED, 0),
                recent.get(AppointmentStatus.NO_SHOW, 0),
            ),
            window_days=self.config.stats_window_days,
        )
