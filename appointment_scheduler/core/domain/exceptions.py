"""
Domain Exceptions for Domain-Driven Design

These exceptions represent business rule violations and domain-specific errors.
They should be caught and translated to appropriate responses by the caller
(routing layer, chat assistant, admin tools).
"""

from typing import Any


class DomainException(Exception):
    """
    Base exception for all domain-related errors.

    Provides a standardized way to communicate business rule violations.
    """

    retryable: bool = False

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "SLOT_LOCKED")
            details: Additional context about the error
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__.upper()
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
            "retryable": self.retryable,
        }


class ValidationException(DomainException):
    """
    Raised when input validation fails.

    Messages are safe to show to the end user verbatim.
    """

    def __init__(self, message: str, field: str | None = None, details: dict[str, Any] | None = None):
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, "VALIDATION_ERROR", details)
        self.field = field


class EntityNotFoundException(DomainException):
    """
    Raised when an entity is not found.
    """

    def __init__(
        self,
        entity_type: str,
        entity_id: Any,
        message: str | None = None,
    ):
        self.entity_type = entity_type
        self.entity_id = entity_id
        msg = message or f"{entity_type} with ID {entity_id} not found"
        super().__init__(
            msg,
            "ENTITY_NOT_FOUND",
            {"entity_type": entity_type, "entity_id": str(entity_id)},
        )


class InvalidOperationException(DomainException):
    """Raised when an operation is not valid in the current state."""

    def __init__(
        self,
        operation: str,
        current_state: str,
        message: str | None = None,
        code: str = "INVALID_OPERATION",
    ):
        self.operation = operation
        self.current_state = current_state
        msg = message or f"Cannot perform '{operation}' in state '{current_state}'"
        super().__init__(
            msg,
            code,
            {"operation": operation, "current_state": current_state},
        )


class InvalidStatusTransitionException(InvalidOperationException):
    """Raised when a status change is not allowed by the lifecycle table."""

    def __init__(self, current_status: str, requested_status: str):
        self.requested_status = requested_status
        super().__init__(
            operation=f"change status to {requested_status}",
            current_state=current_status,
            message=f"Cannot change status from {current_status} to {requested_status}",
            code="INVALID_STATUS_TRANSITION",
        )
        self.details["requested_status"] = requested_status


class StatusTimeGuardException(InvalidOperationException):
    """Raised when a status change is attempted before (or after) the allowed time."""

    def __init__(self, current_status: str, requested_status: str, message: str):
        self.requested_status = requested_status
        super().__init__(
            operation=f"change status to {requested_status}",
            current_state=current_status,
            message=message,
            code="STATUS_TIME_GUARD",
        )
        self.details["requested_status"] = requested_status


class AppointmentConflictException(DomainException):
    """
    Raised when there's a scheduling conflict.

    Conflicts are retryable: the caller may pick another slot or try again.
    """

    retryable = True

    def __init__(
        self,
        staff_id: str | None = None,
        time_slot: str | None = None,
        message: str | None = None,
        code: str = "APPOINTMENT_CONFLICT",
    ):
        self.staff_id = staff_id
        self.time_slot = time_slot
        msg = message or "Appointment conflict: time slot not available"
        details: dict[str, Any] = {}
        if staff_id:
            details["staff_id"] = staff_id
        if time_slot:
            details["time_slot"] = time_slot
        super().__init__(msg, code, details)


class SlotLockedException(AppointmentConflictException):
    """Raised when another booking for the same slot is already in flight."""

    def __init__(self, staff_id: str, time_slot: str):
        super().__init__(
            staff_id=staff_id,
            time_slot=time_slot,
            message="This time slot is currently being booked. Please try again.",
            code="SLOT_LOCKED",
        )


class DuplicateBookingException(AppointmentConflictException):
    """Raised when the customer already holds the exact same booking."""

    def __init__(self, staff_id: str, time_slot: str):
        super().__init__(
            staff_id=staff_id,
            time_slot=time_slot,
            message="You already have this exact booking",
            code="DUPLICATE_BOOKING",
        )
