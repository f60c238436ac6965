"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from app.core.config import AppSettings, LogSettings, ServerSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "PORT",
        "APP_PORT",
        "HOST",
        "APP_HOST",
        "APP_RATE_LIMIT_REQUESTS",
        "APP_RATE_LIMIT_WINDOW_SECONDS",
        "APP_CORS_ORIGINS",
    ):
        monkeypatch.delenv(name, raising=False)


def test_rate_limit_defaults() -> None:
    cfg = AppSettings()

    assert cfg.rate_limit_enabled is True
    assert cfg.rate_limit_requests == 100
    assert cfg.rate_limit_window_seconds == 15 * 60
    assert cfg.rate_limit_message == "Too many requests from this IP, please try again later."


def test_default_port_is_5000() -> None:
    assert ServerSettings().port == 5000


def test_port_from_plain_port_variable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "8080")

    assert ServerSettings().port == 8080


def test_port_from_prefixed_variable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_PORT", "9090")

    assert ServerSettings().port == 9090


def test_invalid_port_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "70000")

    with pytest.raises(ValidationError):
        ServerSettings()


def test_cors_origin_list(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_CORS_ORIGINS", "https://a.example, https://b.example,")

    assert AppSettings().cors_origin_list == ["https://a.example", "https://b.example"]


def test_rate_limit_requests_must_be_positive(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_RATE_LIMIT_REQUESTS", "0")

    with pytest.raises(ValidationError):
        AppSettings()


def test_log_defaults() -> None:
    cfg = LogSettings()

    assert cfg.request_id_header == "X-Request-ID"
    assert cfg.format == "json"
