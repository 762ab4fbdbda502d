"""
Shared utilities (logging).
"""

from appointment_scheduler.core.shared.logger import (
    ColoredFormatter,
    ContextLogger,
    JSONFormatter,
    configure_logging,
    configure_logging_from_settings,
    get_repository_logger,
    get_use_case_logger,
)

__all__ = [
    "ColoredFormatter",
    "ContextLogger",
    "JSONFormatter",
    "configure_logging",
    "configure_logging_from_settings",
    "get_repository_logger",
    "get_use_case_logger",
]
