"""
Service Entity

A bookable service offered by the business. Read-only to the scheduling engine.
"""

from dataclasses import dataclass

from appointment_scheduler.core.domain import Entity


@dataclass
class Service(Entity[str]):
    """Bookable service with a fixed duration."""

    name: str = ""
    duration_minutes: int = 30
    price: float = 0.0
    description: str | None = None
    is_active: bool = True
    display_order: int = 0

    def __post_init__(self):
        if self.duration_minutes <= 0:
            raise ValueError("Service duration must be positive")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "duration_minutes": self.duration_minutes,
            "price": self.price,
            "description": self.description,
            "is_active": self.is_active,
            "display_order": self.display_order,
        }
