"""
Domain Layer - Core DDD building blocks

This module provides base classes for Domain-Driven Design:
- Entities: Objects with identity and lifecycle
- Value Objects: Immutable objects compared by value
- Exceptions: Domain-specific error handling
"""

from appointment_scheduler.core.domain.entities import (
    AggregateRoot,
    Entity,
    generate_uuid_str,
)
from appointment_scheduler.core.domain.exceptions import (
    AppointmentConflictException,
    DomainException,
    DuplicateBookingException,
    EntityNotFoundException,
    InvalidOperationException,
    InvalidStatusTransitionException,
    SlotLockedException,
    StatusTimeGuardException,
    ValidationException,
)
from appointment_scheduler.core.domain.value_objects import (
    CALLING_CODE_RULES,
    CallingCodeRule,
    Email,
    PhoneNumber,
    StatusEnum,
    ValueObject,
)

__all__ = [
    # Entities
    "Entity",
    "AggregateRoot",
    "generate_uuid_str",
    # Value Objects
    "ValueObject",
    "StatusEnum",
    "Email",
    "PhoneNumber",
    "CallingCodeRule",
    "CALLING_CODE_RULES",
    # Exceptions
    "DomainException",
    "ValidationException",
    "EntityNotFoundException",
    "InvalidOperationException",
    "InvalidStatusTransitionException",
    "StatusTimeGuardException",
    "AppointmentConflictException",
    "SlotLockedException",
    "DuplicateBookingException",
]
