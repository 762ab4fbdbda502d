"""
Scheduling Application Ports

Interfaces for repositories and external services.
"""

from .appointment_repository import IAppointmentRepository
from .directory import IDirectory

__all__ = [
    "IAppointmentRepository",
    "IDirectory",
]
