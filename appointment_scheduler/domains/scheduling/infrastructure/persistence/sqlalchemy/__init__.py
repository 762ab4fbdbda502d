"""
Scheduling SQLAlchemy persistence models
"""

from .models import AppointmentModel, HolidayModel, ServiceModel, StaffMemberModel

__all__ = [
    "AppointmentModel",
    "HolidayModel",
    "ServiceModel",
    "StaffMemberModel",
]
