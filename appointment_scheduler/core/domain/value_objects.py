"""
Base Value Object Classes for Domain-Driven Design

Value Objects are immutable domain primitives that have no identity.
They are compared by their values, not by reference.
"""

import re
from abc import ABC
from dataclasses import dataclass
from enum import Enum
from typing import Self


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for all value objects.

    Value objects are:
    - Immutable (frozen=True)
    - Compared by value (dataclass equality)
    - Have no identity

    Example:
        ```python
        @dataclass(frozen=True)
        class Email(ValueObject):
            address: str

            def _validate(self):
                if "@" not in self.address:
                    raise ValueError("Invalid email address")
        ```
    """

    def __post_init__(self):
        """Override to add validation logic."""
        self._validate()

    def _validate(self) -> None:
        """Validate the value object. Override in subclasses."""
        pass


_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass(frozen=True)
class Email(ValueObject):
    """
    Email address value object.

    Validates and normalizes email addresses (trimmed, lowercase).
    """

    address: str

    def _validate(self) -> None:
        normalized = (self.address or "").strip().lower()
        if not _EMAIL_PATTERN.match(normalized):
            raise ValueError("Please provide a valid email address")
        object.__setattr__(self, "address", normalized)

    def get_domain(self) -> str:
        """Get email domain."""
        return self.address.split("@")[1]

    def __str__(self) -> str:
        return self.address


@dataclass(frozen=True)
class CallingCodeRule:
    """National number length rule for an international calling code."""

    country: str
    min_length: int
    max_length: int


# Length-only rules; keys are calling codes without the leading "+"
CALLING_CODE_RULES: dict[str, CallingCodeRule] = {
    "1": CallingCodeRule("USA/Canada", 10, 10),
    "7": CallingCodeRule("Russia", 10, 10),
    "20": CallingCodeRule("Egypt", 10, 10),
    "27": CallingCodeRule("South Africa", 9, 9),
    "31": CallingCodeRule("Netherlands", 9, 9),
    "33": CallingCodeRule("France", 9, 9),
    "34": CallingCodeRule("Spain", 9, 9),
    "39": CallingCodeRule("Italy", 9, 11),
    "44": CallingCodeRule("United Kingdom", 10, 11),
    "49": CallingCodeRule("Germany", 10, 12),
    "52": CallingCodeRule("Mexico", 10, 10),
    "55": CallingCodeRule("Brazil", 10, 11),
    "60": CallingCodeRule("Malaysia", 9, 10),
    "61": CallingCodeRule("Australia", 9, 9),
    "62": CallingCodeRule("Indonesia", 9, 12),
    "63": CallingCodeRule("Philippines", 10, 10),
    "65": CallingCodeRule("Singapore", 8, 8),
    "66": CallingCodeRule("Thailand", 9, 9),
    "81": CallingCodeRule("Japan", 10, 11),
    "82": CallingCodeRule("South Korea", 9, 11),
    "84": CallingCodeRule("Vietnam", 9, 10),
    "86": CallingCodeRule("China", 11, 11),
    "90": CallingCodeRule("Turkey", 10, 10),
    "91": CallingCodeRule("India", 10, 10),
    "92": CallingCodeRule("Pakistan", 10, 10),
    "94": CallingCodeRule("Sri Lanka", 9, 9),
    "234": CallingCodeRule("Nigeria", 10, 10),
    "254": CallingCodeRule("Kenya", 9, 9),
    "880": CallingCodeRule("Bangladesh", 10, 10),
    "966": CallingCodeRule("Saudi Arabia", 9, 9),
    "971": CallingCodeRule("UAE", 9, 9),
    "977": CallingCodeRule("Nepal", 10, 10),
}

GENERIC_MIN_DIGITS = 8
GENERIC_MAX_DIGITS = 15

_PHONE_SEPARATORS = re.compile(r"[\s\-().]")


@dataclass(frozen=True)
class PhoneNumber(ValueObject):
    """
    International phone number value object.

    Accepts ``+<calling code><national number>``; common separators are
    stripped. Known calling codes are checked against their national length
    range, unknown ones against a generic total-length range.
    """

    number: str

    def _validate(self) -> None:
        cleaned = _PHONE_SEPARATORS.sub("", (self.number or "").strip())

        if not cleaned.startswith("+"):
            raise ValueError("Phone number must start with country code (e.g., +91 for India, +1 for USA)")

        digits = cleaned[1:]
        if not digits.isdigit():
            raise ValueError("Phone number can only contain digits after the country code")

        calling_code = self._match_calling_code(digits)
        if calling_code is None:
            if not GENERIC_MIN_DIGITS <= len(digits) <= GENERIC_MAX_DIGITS:
                raise ValueError(
                    f"Phone number should be {GENERIC_MIN_DIGITS}-{GENERIC_MAX_DIGITS} digits including country code"
                )
        else:
            rule = CALLING_CODE_RULES[calling_code]
            national = digits[len(calling_code) :]
            if len(national) < rule.min_length:
                raise ValueError(
                    f"{rule.country} numbers need {rule.min_length} digits after +{calling_code} "
                    f"(you provided {len(national)})"
                )
            if len(national) > rule.max_length:
                raise ValueError(
                    f"{rule.country} numbers have max {rule.max_length} digits after +{calling_code} "
                    f"(you provided {len(national)})"
                )

        object.__setattr__(self, "number", cleaned)

    @staticmethod
    def _match_calling_code(digits: str) -> str | None:
        """Longest-prefix match of the calling code (3, then 2, then 1 digits)."""
        for length in (3, 2, 1):
            candidate = digits[:length]
            if candidate in CALLING_CODE_RULES:
                return candidate
        return None

    @property
    def calling_code(self) -> str | None:
        """Matched calling code, or None for codes outside the rules table."""
        return self._match_calling_code(self.number[1:])

    def __str__(self) -> str:
        return self.number


class StatusEnum(str, Enum):
    """
    Base class for status enums.

    Provides common functionality for all status value objects.
    """

    @classmethod
    def values(cls) -> list[str]:
        """Get all possible values."""
        return [e.value for e in cls]

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Create from string value (case-insensitive)."""
        for member in cls:
            if member.value.lower() == value.lower():
                return member
        raise ValueError(f"Invalid {cls.__name__}: {value}")

    def __str__(self) -> str:
        return self.value
