"""
Scheduling SQLAlchemy Models

Database models for scheduling domain persistence.
"""

from typing import Any

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    Date,
    Float,
    Index,
    Integer,
    String,
    Text,
    Time,
)

from appointment_scheduler.database.base import Base, TimestampMixin
from appointment_scheduler.domains.scheduling.domain.value_objects import AppointmentStatus


class ServiceModel(Base, TimestampMixin):
    """SQLAlchemy model for Service entity."""

    __tablename__ = "services"

    id = Column(String(64), primary_key=True)
    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    duration_minutes = Column(Integer, nullable=False, default=30)
    price = Column(Float, nullable=False, default=0.0)
    is_active = Column(Boolean, nullable=False, default=True)
    display_order = Column(Integer, nullable=False, default=0)


class StaffMemberModel(Base, TimestampMixin):
    """SQLAlchemy model for StaffMember entity."""

    __tablename__ = "staff_members"

    id = Column(String(64), primary_key=True)
    name = Column(String(200), nullable=False)
    role = Column(String(100), nullable=False, default="")
    # Empty list = performs every service
    service_ids = Column(JSON, nullable=False, default=list)
    # {"monday": {"start": "09:00", "end": "13:00"}, ...}; NULL = full business hours
    schedule = Column(JSON, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)


class HolidayModel(Base, TimestampMixin):
    """SQLAlchemy model for Holiday entity."""

    __tablename__ = "holidays"

    id = Column(String(64), primary_key=True)
    holiday_date = Column(Date, nullable=False, unique=True, index=True)
    name = Column(String(200), nullable=False)
    is_closed = Column(Boolean, nullable=False, default=True)
    custom_open = Column(Time, nullable=True)
    custom_close = Column(Time, nullable=True)


class AppointmentModel(Base, TimestampMixin):
    """SQLAlchemy model for Appointment entity."""

    __tablename__ = "appointments"

    id = Column(String(64), primary_key=True)

    # Customer
    customer_name = Column(String(200), nullable=False)
    customer_email = Column(String(255), nullable=False, index=True)
    customer_phone = Column(String(20), nullable=False)

    # References and name snapshots
    service_id = Column(String(64), nullable=False)
    service_name = Column(String(200), nullable=False)
    staff_id = Column(String(64), nullable=False)
    staff_name = Column(String(200), nullable=False)

    # Scheduling (naive wall clock)
    appointment_date = Column(Date, nullable=False)
    start_time = Column(Time, nullable=False)
    duration_minutes = Column(Integer, nullable=False)

    status = Column(String(20), nullable=False, default=AppointmentStatus.PENDING.value, index=True)
    notes = Column(Text, nullable=True)

    __table_args__ = (
        Index("ix_appointments_date_status", "appointment_date", "status"),
        Index("ix_appointments_staff_date", "staff_id", "appointment_date"),
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "customer_email": self.customer_email,
            "staff_id": self.staff_id,
            "date": self.appointment_date.isoformat() if self.appointment_date else None,
            "time": self.start_time.strftime("%H:%M") if self.start_time else None,
            "status": self.status,
        }
