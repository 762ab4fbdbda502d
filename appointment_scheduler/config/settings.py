import re
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from appointment_scheduler.domains.scheduling.domain.value_objects.business_hours import (
    WEEKDAY_NAMES,
    DailyHours,
    SchedulingConfig,
)

_HHMM = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


class OpeningHours(BaseModel):
    """Opening hours for one weekday; both null means closed."""

    open: str | None = None
    close: str | None = None

    @field_validator("open", "close")
    @classmethod
    def validate_hhmm(cls, value: str | None) -> str | None:
        if value is not None and not _HHMM.match(value):
            raise ValueError(f"Invalid time '{value}'. Use HH:MM (24-hour)")
        return value

    @model_validator(mode="after")
    def validate_window(self) -> "OpeningHours":
        if self.open and self.close and self.open >= self.close:
            raise ValueError(f"Opening time {self.open} must be before closing time {self.close}")
        return self


def _default_business_hours() -> dict[str, OpeningHours]:
    weekday = OpeningHours(open="09:00", close="17:00")
    return {
        "monday": weekday,
        "tuesday": weekday,
        "wednesday": weekday,
        "thursday": weekday,
        "friday": weekday,
        "saturday": OpeningHours(open="10:00", close="14:00"),
        "sunday": OpeningHours(),
    }


class Settings(BaseSettings):
    """
    Scheduling engine configuration using Pydantic BaseSettings.
    Values are loaded from environment variables (or a .env file).
    """

    PROJECT_NAME: str = Field("Appointment Scheduler", description="Display name used in logs")
    VERSION: str = Field("0.1.0", description="Engine version")

    # Business rules
    BUSINESS_HOURS: dict[str, OpeningHours] = Field(
        default_factory=_default_business_hours,
        description="Weekly opening hours keyed by weekday name (JSON in env)",
    )
    SLOT_DURATION_MINUTES: int = Field(30, description="Granularity of generated slots in minutes")
    BUFFER_MINUTES: int = Field(10, description="Idle minutes required after each booking")
    MAX_ADVANCE_BOOKING_DAYS: int = Field(30, description="How many days ahead a booking may be placed")
    DEFAULT_TIMEZONE_OFFSET_MINUTES: int = Field(
        -300,
        description="Offset used by status time guards when the caller sends none (getTimezoneOffset style, UTC+5 = -300)",
    )
    STATS_WINDOW_DAYS: int = Field(30, description="Window used for the no-show rate")

    # PostgreSQL Database Settings
    DB_HOST: str = Field("localhost", description="PostgreSQL host")
    DB_PORT: int = Field(5432, description="PostgreSQL port")
    DB_NAME: str = Field("appointments", description="Database name")
    DB_USER: str = Field("postgres", description="PostgreSQL user")
    DB_PASSWORD: str | None = Field(None, description="PostgreSQL password")
    DB_ECHO: bool = Field(False, description="Log SQL statements (debugging only)")

    # Database connection pool settings
    DB_POOL_SIZE: int = Field(10, description="Connection pool size")
    DB_MAX_OVERFLOW: int = Field(20, description="Connections allowed beyond the pool size")
    DB_POOL_RECYCLE: int = Field(3600, description="Recycle pooled connections after this many seconds")
    DB_POOL_TIMEOUT: int = Field(30, description="Seconds to wait for a pooled connection")

    # Application Settings
    DEBUG: bool = Field(False, description="Debug mode (disables connection pooling)")
    ENVIRONMENT: str = Field("production", description="Deployment environment name")
    LOG_LEVEL: str = Field("INFO", description="Root log level")
    LOG_FORMAT: str = Field("colored", description="Console log format: 'colored', 'json' or 'plain'")
    LOG_FILE: str | None = Field(None, description="Optional log file path (always JSON)")

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("BUSINESS_HOURS", mode="before")
    @classmethod
    def normalize_weekday_keys(cls, value: Any) -> Any:
        if isinstance(value, dict):
            normalized = {str(day).strip().lower(): hours for day, hours in value.items()}
            unknown = set(normalized) - set(WEEKDAY_NAMES)
            if unknown:
                raise ValueError(f"Unknown weekday(s) in BUSINESS_HOURS: {', '.join(sorted(unknown))}")
            return normalized
        return value

    @field_validator("SLOT_DURATION_MINUTES")
    @classmethod
    def validate_slot_duration(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("SLOT_DURATION_MINUTES must be positive")
        return value

    @field_validator("BUFFER_MINUTES", "MAX_ADVANCE_BOOKING_DAYS", "STATS_WINDOW_DAYS")
    @classmethod
    def validate_non_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("Value cannot be negative")
        return value

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, value: str) -> str:
        if value not in ("colored", "json", "plain"):
            raise ValueError("LOG_FORMAT must be 'colored', 'json' or 'plain'")
        return value

    @property
    def scheduling_config(self) -> SchedulingConfig:
        """Plain configuration object consumed by the scheduling domain."""
        weekly_hours: dict[int, DailyHours | None] = {}
        for weekday, name in enumerate(WEEKDAY_NAMES):
            hours = self.BUSINESS_HOURS.get(name)
            if hours is None or not hours.open or not hours.close:
                weekly_hours[weekday] = None
            else:
                weekly_hours[weekday] = DailyHours.parse(hours.open, hours.close)

        return SchedulingConfig(
            weekly_hours=weekly_hours,
            slot_duration_minutes=self.SLOT_DURATION_MINUTES,
            buffer_minutes=self.BUFFER_MINUTES,
            max_advance_booking_days=self.MAX_ADVANCE_BOOKING_DAYS,
            default_timezone_offset_minutes=self.DEFAULT_TIMEZONE_OFFSET_MINUTES,
            stats_window_days=self.STATS_WINDOW_DAYS,
        )


# Module-level settings singleton
_settings_instance = None


def get_settings() -> Settings:
    """
    Return the cached Settings instance.
    Environment variables and .env are read once per process.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
