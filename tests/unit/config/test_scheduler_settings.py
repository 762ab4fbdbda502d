"""
Unit tests for Settings.

Tests environment loading, business hours parsing and the derived
SchedulingConfig.
"""

import json

import pytest
from pydantic import ValidationError

from appointment_scheduler.config import OpeningHours, Settings
from appointment_scheduler.domains.scheduling.domain.value_objects import DailyHours


@pytest.fixture
def clean_env(monkeypatch):
    for key in (
        "BUSINESS_HOURS",
        "SLOT_DURATION_MINUTES",
        "BUFFER_MINUTES",
        "MAX_ADVANCE_BOOKING_DAYS",
        "DEFAULT_TIMEZONE_OFFSET_MINUTES",
        "LOG_FORMAT",
    ):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


@pytest.mark.unit
class TestSettings:
    """Tests for Settings defaults and overrides."""

    def test_defaults(self, clean_env):
        settings = Settings(_env_file=None)

        assert settings.SLOT_DURATION_MINUTES == 30
        assert settings.BUFFER_MINUTES == 10
        assert settings.MAX_ADVANCE_BOOKING_DAYS == 30
        assert settings.DEFAULT_TIMEZONE_OFFSET_MINUTES == -300

    def test_every_field_has_an_ascii_description(self):
        for name, field in Settings.model_fields.items():
            assert field.description, name
            assert field.description.isascii(), name

    def test_default_business_hours(self, clean_env):
        config = Settings(_env_file=None).scheduling_config

        assert config.hours_for_weekday(0) == DailyHours.parse("09:00", "17:00")
        assert config.hours_for_weekday(5) == DailyHours.parse("10:00", "14:00")
        assert config.hours_for_weekday(6) is None

    def test_env_overrides(self, clean_env, test_env_vars):
        clean_env.setenv("SLOT_DURATION_MINUTES", "15")
        clean_env.setenv("BUFFER_MINUTES", "0")

        settings = Settings(_env_file=None)

        assert settings.DB_NAME == "appointments_test"
        assert settings.scheduling_config.slot_duration_minutes == 15
        assert settings.scheduling_config.buffer_minutes == 0

    def test_business_hours_from_json(self, clean_env):
        clean_env.setenv(
            "BUSINESS_HOURS",
            json.dumps({"Monday": {"open": "08:00", "close": "12:00"}, "sunday": {"open": None, "close": None}}),
        )

        config = Settings(_env_file=None).scheduling_config

        assert config.hours_for_weekday(0) == DailyHours.parse("08:00", "12:00")
        # Days not listed are closed
        assert config.hours_for_weekday(1) is None
        assert config.hours_for_weekday(6) is None

    def test_unknown_weekday_rejected(self, clean_env):
        clean_env.setenv("BUSINESS_HOURS", json.dumps({"funday": {"open": "09:00", "close": "10:00"}}))

        with pytest.raises(ValidationError, match="funday"):
            Settings(_env_file=None)

    @pytest.mark.parametrize(
        "key,value",
        [("SLOT_DURATION_MINUTES", "0"), ("BUFFER_MINUTES", "-5"), ("LOG_FORMAT", "xml")],
    )
    def test_invalid_values(self, clean_env, key, value):
        clean_env.setenv(key, value)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)


@pytest.mark.unit
class TestOpeningHours:
    """Tests for the OpeningHours model."""

    def test_closed_day(self):
        hours = OpeningHours()

        assert hours.open is None
        assert hours.close is None

    def test_invalid_time(self):
        with pytest.raises(ValidationError):
            OpeningHours(open="9am", close="17:00")

    def test_open_after_close(self):
        with pytest.raises(ValidationError, match="must be before closing time"):
            OpeningHours(open="18:00", close="09:00")
