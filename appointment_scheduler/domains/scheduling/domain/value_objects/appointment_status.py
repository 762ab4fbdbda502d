"""
Appointment Status Value Object

Lifecycle states for appointments and the transition table between them.
"""

from appointment_scheduler.core.domain import StatusEnum


class AppointmentStatus(StatusEnum):
    """
    Appointment lifecycle states.

    Valid transitions:
    - PENDING -> CONFIRMED, CANCELLED, NO_SHOW
    - CONFIRMED -> CANCELLED, COMPLETED, NO_SHOW
    - COMPLETED, NO_SHOW, CANCELLED -> (terminal)
    """

    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    NO_SHOW = "no-show"
    CANCELLED = "cancelled"

    def allowed_transitions(self) -> tuple["AppointmentStatus", ...]:
        return _TRANSITIONS[self]

    def can_transition_to(self, new_status: "AppointmentStatus") -> bool:
        """Check if transition to new status is valid."""
        return new_status in _TRANSITIONS[self]

    def is_terminal(self) -> bool:
        """Check if this is a terminal state."""
        return not _TRANSITIONS[self]

    def is_active(self) -> bool:
        """Active appointments hold their slot."""
        return self in ACTIVE_STATUSES

    def requires_elapsed_start(self) -> bool:
        """Moving into this status requires the scheduled start to have passed."""
        return self in (AppointmentStatus.CONFIRMED, AppointmentStatus.COMPLETED, AppointmentStatus.NO_SHOW)


_TRANSITIONS: dict[AppointmentStatus, tuple[AppointmentStatus, ...]] = {
    AppointmentStatus.PENDING: (
        AppointmentStatus.CONFIRMED,
        AppointmentStatus.CANCELLED,
        AppointmentStatus.NO_SHOW,
    ),
    AppointmentStatus.CONFIRMED: (
        AppointmentStatus.CANCELLED,
        AppointmentStatus.COMPLETED,
        AppointmentStatus.NO_SHOW,
    ),
    AppointmentStatus.COMPLETED: (),
    AppointmentStatus.NO_SHOW: (),
    AppointmentStatus.CANCELLED: (),
}

ACTIVE_STATUSES: tuple[AppointmentStatus, ...] = (AppointmentStatus.PENDING, AppointmentStatus.CONFIRMED)
