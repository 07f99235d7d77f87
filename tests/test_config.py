"""
Configuration tests.

Covers base URL validation (fail fast, before any request), environment
loading through pydantic-settings, and the response shape override.
"""

import httpx
import pytest

from api.transport import Transport
from app.config import DEFAULT_API_BASE_URL, Environment, Settings, validate_base_url
from app.exceptions import ConfigurationError
from domain.enums import ResponseShape
from test_fixtures import RequestCounter


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("http://localhost:8000", "http://localhost:8000"),
        ("http://10.0.0.232:8000/", "http://10.0.0.232:8000"),
        ("  https://api.pocketsomm.app/v1/  ", "https://api.pocketsomm.app/v1"),
    ],
)
def test_validate_base_url_accepts_http_urls(raw, expected):
    assert validate_base_url(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [
        None,
        "",
        "   ",
        "localhost:8000/api",
        "ftp://files.pocketsomm.app",
        "http://",
        "/relative/path",
        "https://api.pocketsomm.app/?debug=1",
    ],
)
def test_validate_base_url_rejects_malformed_values(raw):
    with pytest.raises(ConfigurationError):
        validate_base_url(raw)


def test_settings_defaults(monkeypatch):
    for name in (
        "API_BASE_URL",
        "RESPONSE_SHAPE",
        "ENVIRONMENT",
        "REQUEST_TIMEOUT_SEC",
        "RESOURCE_TIMEOUT_SEC",
    ):
        monkeypatch.delenv(name, raising=False)

    cfg = Settings(_env_file=None)

    assert cfg.api_base_url == DEFAULT_API_BASE_URL
    assert cfg.request_timeout_sec == 120.0
    assert cfg.resource_timeout_sec == 240.0
    assert cfg.response_shape is None
    assert cfg.environment == Environment.DEVELOPMENT


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("API_BASE_URL", "https://api.pocketsomm.app")
    monkeypatch.setenv("RESPONSE_SHAPE", "Enveloped")
    monkeypatch.setenv("ENVIRONMENT", "PRODUCTION")
    monkeypatch.setenv("REQUEST_TIMEOUT_SEC", "15")

    cfg = Settings(_env_file=None)

    assert cfg.api_base_url == "https://api.pocketsomm.app"
    assert cfg.response_shape == ResponseShape.ENVELOPED
    assert cfg.is_production()
    assert cfg.request_timeout_sec == 15.0


def test_blank_response_shape_means_per_endpoint(monkeypatch):
    monkeypatch.setenv("RESPONSE_SHAPE", "")

    assert Settings(_env_file=None).response_shape is None


@pytest.mark.parametrize("raw", ["", "not a url", "ftp://pocketsomm"])
def test_transport_fails_fast_on_bad_base_url(raw):
    """Configuration errors surface at construction; no request is attempted."""
    counter = RequestCounter()

    with pytest.raises(ConfigurationError):
        Transport(raw, transport=httpx.MockTransport(counter))

    assert counter.calls == []


def test_transport_from_settings_uses_configured_url():
    cfg = Settings(_env_file=None, api_base_url="http://10.0.0.232:8000/")

    transport = Transport.from_settings(cfg, transport=httpx.MockTransport(RequestCounter()))

    assert transport.base_url == "http://10.0.0.232:8000"
