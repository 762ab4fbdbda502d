"""
Appointment Scheduler

Scheduling and availability engine for a single-location service business:
slot generation, staff conflict detection, concurrency-safe booking and the
appointment status lifecycle.
"""

__version__ = "0.1.0"
