"""
Booking Rules

Calendar parsing and clock helpers. All scheduling happens in the business's
naive wall clock; callers may supply a ``getTimezoneOffset``-style offset
(minutes, UTC+5 = -300) to shift "now" into their own wall clock.
"""

import re
from collections.abc import Callable
from datetime import UTC, date, datetime, time, timedelta

from appointment_scheduler.core.domain import ValidationException

from ..value_objects.business_hours import TIME_24H_PATTERN, WEEKDAY_NAMES, SchedulingConfig

Clock = Callable[[], datetime]

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def utc_now() -> datetime:
    return datetime.now(UTC)


def parse_date(value: str) -> date | None:
    """Parse ``YYYY-MM-DD`` into a real calendar date, None when malformed."""
    if not isinstance(value, str) or not DATE_PATTERN.match(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def parse_time(value: str) -> time | None:
    """Parse 24-hour ``HH:MM``, None when malformed."""
    if not isinstance(value, str):
        return None
    match = TIME_24H_PATTERN.match(value)
    if not match:
        return None
    return time(int(match.group(1)), int(match.group(2)))


def server_now(clock: Clock) -> datetime:
    """Naive wall clock of the server."""
    return clock().astimezone().replace(tzinfo=None)


def shifted_now(clock: Clock, offset_minutes: int) -> datetime:
    """Naive wall clock of a caller whose UTC offset is ``-offset_minutes``."""
    utc_naive = clock().astimezone(UTC).replace(tzinfo=None)
    return utc_naive - timedelta(minutes=offset_minutes)


def caller_now(clock: Clock, offset_minutes: int | None = None) -> datetime:
    """Caller's wall clock when an offset is known, the server's otherwise."""
    if offset_minutes is None:
        return server_now(clock)
    return shifted_now(clock, offset_minutes)


def is_date_in_past(day: date, today: date) -> bool:
    return day < today


def is_beyond_horizon(day: date, today: date, max_advance_days: int) -> bool:
    return day > today + timedelta(days=max_advance_days)


def is_slot_in_past(day: date, start: time, now: datetime) -> bool:
    """A slot is past once its start is at or before ``now``."""
    return datetime.combine(day, start) <= now


def validate_booking_date(date_str: str, today: date, config: SchedulingConfig) -> date:
    """
    Parse a requested booking date and enforce the calendar rules.

    Raises:
        ValidationException: Malformed, past, beyond the horizon or a closed weekday
    """
    day = parse_date(date_str)
    if day is None:
        raise ValidationException("Invalid date format. Use YYYY-MM-DD", field="date")

    if is_date_in_past(day, today):
        raise ValidationException("Cannot book appointments in the past", field="date")

    max_days = config.max_advance_booking_days
    if is_beyond_horizon(day, today, max_days):
        raise ValidationException(f"Cannot book more than {max_days} days in advance", field="date")

    if config.hours_for_weekday(day.weekday()) is None:
        raise ValidationException(f"Sorry, we are closed on {WEEKDAY_NAMES[day.weekday()]}s", field="date")
    return day


def validate_booking_time(time_str: str) -> time:
    start = parse_time(time_str)
    if start is None:
        raise ValidationException("Invalid time format. Use HH:MM (24-hour)", field="time")
    return start
