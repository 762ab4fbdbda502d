"""
Scheduling Use Cases

Application use cases for availability, booking and the appointment lifecycle.
"""

from .book_appointment import BookAppointmentUseCase
from .cancel_appointment import CancelAppointmentUseCase
from .get_appointment_stats import GetAppointmentStatsUseCase
from .get_appointments import GetAppointmentsUseCase
from .get_available_slots import GetAvailableSlotsUseCase
from .reschedule_appointment import RescheduleAppointmentUseCase
from .update_appointment_status import UpdateAppointmentStatusUseCase

__all__ = [
    "BookAppointmentUseCase",
    "CancelAppointmentUseCase",
    "GetAppointmentStatsUseCase",
    "GetAppointmentsUseCase",
    "GetAvailableSlotsUseCase",
    "RescheduleAppointmentUseCase",
    "UpdateAppointmentStatusUseCase",
]
