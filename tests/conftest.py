import pytest

from inetaddr.config import get_settings

SETTINGS_ENV = ("APP_NAME", "APP_ENV", "LOG_LEVEL", "LOG_FORMAT", "IPV6_EXPANDED", "JSON_INDENT")


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from the caller's environment and the settings cache."""
    for name in SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
