from __future__ import annotations

import pytest
from pydantic import ValidationError

from leadfunnel.main.config import AppSettings, ServicesSettings, get_settings
from leadfunnel.shared.consts import EnumEnvironment

_SERVICE_VARS = [
    "ANALYZER_SERVICE_URL",
    "BUILDER_SERVICE_URL",
    "SERVICE_AUTH_TOKEN",
    "SERVICES_ANALYZER_URL",
    "SERVICES_BUILDER_URL",
    "SERVICES_AUTH_TOKEN",
    "NEXT_PUBLIC_API_URL",
    "PUBLIC_API_URL",
    "SERVICES_PUBLIC_API_URL",
    "ENVIRONMENT",
]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in _SERVICE_VARS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir("/")


def test_get_settings_loads_defaults() -> None:
    settings = get_settings()

    assert settings.environment == EnumEnvironment.DEVELOPMENT
    assert settings.services.analyzer_url == "http://127.0.0.1:8001"
    assert settings.services.builder_url == "http://127.0.0.1:8002"
    assert settings.services.auth_token is None
    assert settings.services.analyze_timeout == 120.0
    assert settings.services.generate_timeout == 60.0
    assert settings.services.screenshot_timeout == 30.0
    assert settings.services.health_timeout == 5.0
    assert settings.app.port == 3000


def test_settings_respect_service_environment_variables(monkeypatch) -> None:
    monkeypatch.setenv("ANALYZER_SERVICE_URL", "http://analyzer:9001")
    monkeypatch.setenv("BUILDER_SERVICE_URL", "http://builder:9002")
    monkeypatch.setenv("SERVICE_AUTH_TOKEN", "secret")
    monkeypatch.setenv("NEXT_PUBLIC_API_URL", "https://funnel.example")
    monkeypatch.setenv("SERVICES_ANALYZE_TIMEOUT", "90")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = AppSettings()

    assert settings.services.analyzer_url == "http://analyzer:9001"
    assert settings.services.builder_url == "http://builder:9002"
    assert settings.services.auth_token == "secret"
    assert settings.services.public_api_url == "https://funnel.example"
    assert settings.services.analyze_timeout == 90.0
    assert settings.logging.level.value == "DEBUG"


def test_timeouts_must_be_positive(monkeypatch) -> None:
    monkeypatch.setenv("SERVICES_HEALTH_TIMEOUT", "0")

    with pytest.raises(ValidationError):
        ServicesSettings()
