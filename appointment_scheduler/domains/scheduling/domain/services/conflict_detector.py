"""
Conflict Detector

Interval overlap rules shared by the availability projection and the
authoritative check made while a booking holds the slot lock.
"""

from collections.abc import Iterable

from ..value_objects.active_booking import ActiveBooking


def intervals_overlap(start: int, span: int, other_start: int, other_span: int) -> bool:
    """
    Check whether [start, start+span) collides with [other_start, other_start+other_span).

    All values are minutes. Collides when the candidate starts inside the other
    interval, ends inside it, or fully contains it.
    """
    end = start + span
    other_end = other_start + other_span
    return (
        (other_start <= start < other_end)
        or (other_start < end <= other_end)
        or (start <= other_start and end >= other_end)
    )


def booking_conflicts(
    start: int,
    duration: int,
    bookings: Iterable[ActiveBooking],
    buffer_minutes: int,
) -> bool:
    """True if the candidate overlaps any booking once the buffer is appended to it."""
    return any(
        intervals_overlap(start, duration, booking.start_minutes, booking.duration_minutes + buffer_minutes)
        for booking in bookings
    )


def bookings_for_staff(bookings: Iterable[ActiveBooking], staff_id: str) -> list[ActiveBooking]:
    return [booking for booking in bookings if booking.staff_id == staff_id]
