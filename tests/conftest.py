import pytest

from taxitariff import derive_all_tariffs, norwegian_holidays
from taxitariff.settings import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    for name in ("TAXI_TIMEZONE", "TAXI_MAX_TRIP_MINUTES", "TAXI_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def tariffs():
    return derive_all_tariffs(None)


@pytest.fixture
def holidays():
    return norwegian_holidays(2025)
