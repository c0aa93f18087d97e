from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from taxitariff.settings import TariffSettings, get_settings


class TestTariffSettings:
    def test_defaults(self):
        settings = TariffSettings()
        assert settings.timezone == "Europe/Oslo"
        assert settings.max_trip_minutes == 10080
        assert settings.log_level == "INFO"
        assert settings.tzinfo == ZoneInfo("Europe/Oslo")

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("TAXI_TIMEZONE", "UTC")
        monkeypatch.setenv("TAXI_MAX_TRIP_MINUTES", "600")
        monkeypatch.setenv("TAXI_LOG_LEVEL", "DEBUG")

        settings = TariffSettings()
        assert settings.timezone == "UTC"
        assert settings.max_trip_minutes == 600
        assert settings.log_level == "DEBUG"

    def test_validation(self):
        with pytest.raises(ValidationError):
            TariffSettings(timezone="Mars/Olympus_Mons")

        with pytest.raises(ValidationError):
            TariffSettings(max_trip_minutes=0)

        with pytest.raises(ValidationError):
            TariffSettings(log_level="TRACE")

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
