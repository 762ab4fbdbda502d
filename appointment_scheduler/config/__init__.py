"""
Configuration Module

Application configuration settings and utilities.
"""

from appointment_scheduler.config.settings import OpeningHours, Settings, get_settings

__all__ = [
    "OpeningHours",
    "Settings",
    "get_settings",
]
