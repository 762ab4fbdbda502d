"""
Scheduling Repository Implementations
"""

from .appointment_repository import SQLAlchemyAppointmentRepository
from .directory_repository import SQLAlchemyDirectoryRepository, schedule_from_json

__all__ = [
    "SQLAlchemyAppointmentRepository",
    "SQLAlchemyDirectoryRepository",
    "schedule_from_json",
]
