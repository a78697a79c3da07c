"""폼 CLI 테스트."""

from __future__ import annotations

import requests

from app import cli
from app.core.config import get_settings

WEBHOOK_URL = "https://hooks.example.com/itinerary"
VALID_ARGS = [
    "--destination",
    "Hanoi",
    "--days",
    "6",
    "--budget",
    "800",
    "--travel-mode",
    "bus",
    "--travelers",
    "1",
    "--email",
    "solo@example.com",
]


def _set_required_env(monkeypatch, **overrides: str) -> None:
    monkeypatch.setenv("WEBHOOK_URL", WEBHOOK_URL)
    for key, value in overrides.items():
        monkeypatch.setenv(key, value)
    get_settings.cache_clear()


def _fake_response(status_code: int, body: str, content_type: str | None = None):
    class _Response:
        pass

    response = _Response()
    response.status_code = status_code
    response.text = body
    response.headers = {"Content-Type": content_type} if content_type else {}
    return response


def test_cli_prints_overlay_text_on_success(monkeypatch, capsys) -> None:
    _set_required_env(monkeypatch)
    monkeypatch.setattr(
        "app.services.webhook_client.requests.post",
        lambda url, **kwargs: _fake_response(200, '{"plan":"Day 1..."}', "application/json"),
    )

    exit_code = cli.main(VALID_ARGS)

    out = capsys.readouterr().out
    assert exit_code == cli.EXIT_OK
    assert '"plan": "Day 1..."' in out
    assert "Itinerary request failed" not in out


def test_cli_exits_with_failure_on_error_status(monkeypatch, capsys) -> None:
    _set_required_env(monkeypatch)
    monkeypatch.setattr(
        "app.services.webhook_client.requests.post",
        lambda url, **kwargs: _fake_response(500, "Server error", "text/plain"),
    )

    exit_code = cli.main(VALID_ARGS)

    out = capsys.readouterr().out
    assert exit_code == cli.EXIT_WEBHOOK_FAILED
    assert "Itinerary request failed" in out
    assert "Server error" in out


def test_cli_reports_validation_error_without_request(monkeypatch, capsys) -> None:
    _set_required_env(monkeypatch)
    call_count = {"value": 0}

    def _fake_post(url, **kwargs):
        call_count["value"] += 1
        return _fake_response(200, "ok", "text/plain")

    monkeypatch.setattr("app.services.webhook_client.requests.post", _fake_post)

    exit_code = cli.main([*VALID_ARGS, "--days", "31"])

    captured = capsys.readouterr()
    assert exit_code == cli.EXIT_INVALID_INPUT
    assert captured.err.strip() == "Days must be between 1 and 30."
    assert call_count["value"] == 0


def test_cli_webhook_url_override_works_without_env(monkeypatch, capsys) -> None:
    monkeypatch.delenv("WEBHOOK_URL", raising=False)
    get_settings.cache_clear()
    captured: dict = {}

    def _fake_post(url, **kwargs):
        captured["url"] = url
        raise requests.ConnectionError("refused")

    monkeypatch.setattr("app.services.webhook_client.requests.post", _fake_post)

    exit_code = cli.main([*VALID_ARGS, "--webhook-url", "https://other.example.com/hook"])

    out = capsys.readouterr().out
    assert exit_code == cli.EXIT_WEBHOOK_FAILED
    assert captured["url"] == "https://other.example.com/hook"
    assert "Error connecting to server. Please try again later." in out


def test_cli_reports_validation_error_before_loading_settings(monkeypatch, capsys) -> None:
    monkeypatch.delenv("WEBHOOK_URL", raising=False)
    get_settings.cache_clear()

    exit_code = cli.main(["--destination", "", "--days", "3"])

    captured = capsys.readouterr()
    assert exit_code == cli.EXIT_INVALID_INPUT
    assert captured.err.strip() == "Please enter a destination."


def test_cli_reports_missing_webhook_url_for_valid_form(monkeypatch, capsys) -> None:
    monkeypatch.delenv("WEBHOOK_URL", raising=False)
    get_settings.cache_clear()
    call_count = {"value": 0}

    def _fake_post(url, **kwargs):
        call_count["value"] += 1
        return _fake_response(200, "ok", "text/plain")

    monkeypatch.setattr("app.services.webhook_client.requests.post", _fake_post)

    exit_code = cli.main(VALID_ARGS)

    captured = capsys.readouterr()
    assert exit_code == cli.EXIT_CONFIG_ERROR
    assert "WEBHOOK_URL is not configured" in captured.err
    assert call_count["value"] == 0
