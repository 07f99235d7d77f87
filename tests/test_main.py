"""
Command-line entry point tests.
"""

import json

import httpx
import pytest

import main
from api.dependencies import open_client
from app.config import Settings
from test_constants import SPENCER_ID
from test_fixtures import FakeBackend, make_settings


@pytest.fixture
def cli_backend(monkeypatch):
    """Route the CLI's client to an in-process backend."""
    backend = FakeBackend()
    monkeypatch.setattr(main, "settings", make_settings())
    monkeypatch.setattr(
        main,
        "open_client",
        lambda cfg: open_client(cfg, transport=httpx.ASGITransport(app=backend.app)),
    )
    return backend


def test_profile_command_prints_snapshot(cli_backend, capsys):
    assert main.main(["--user", SPENCER_ID, "profile"]) == 0

    output = json.loads(capsys.readouterr().out)
    assert output["profile"]["user_id"] == SPENCER_ID
    assert output["insights"]["top_countries"] == ["France"]


def test_wine_command_prints_detail_and_similar(cli_backend, capsys):
    assert main.main(["wine", "chateau_x"]) == 0

    output = json.loads(capsys.readouterr().out)
    assert output["detail"]["name"] == "Château X Grand Vin"
    assert len(output["similar"]) == 2


def test_tasting_command(cli_backend, capsys):
    assert main.main(["--user", SPENCER_ID, "tasting", "chateau_x", "4", "--notes", "great"]) == 0

    assert cli_backend.requests[0]["body"] == {"wine_id": "chateau_x", "rating": 4.0, "notes": "great"}


def test_server_error_is_reported_on_stderr(cli_backend, capsys):
    assert main.main(["wine", "chateau_y"]) == 1

    captured = capsys.readouterr()
    assert "error: Wine chateau_y not found" in captured.err
    assert captured.out == ""


def test_blank_search_prints_empty_list(cli_backend, capsys):
    assert main.main(["search", "   "]) == 0

    assert json.loads(capsys.readouterr().out) == []
    assert cli_backend.requests == []


def test_user_required_for_user_commands(cli_backend, capsys):
    assert main.main(["profile"]) == 1

    assert "pass --user or set DEFAULT_USER_ID" in capsys.readouterr().err


def test_bad_base_url_fails_before_any_request(monkeypatch, capsys):
    monkeypatch.setattr(main, "settings", Settings(_env_file=None, api_base_url="not a url"))

    assert main.main(["health"]) == 1

    assert "error: Invalid API configuration: not a url" in capsys.readouterr().err


def test_health_command_prints_status(cli_backend, capsys):
    assert main.main(["health"]) == 0

    assert json.loads(capsys.readouterr().out) == "ok"
    assert cli_backend.requests[0]["path"] == "/health"
