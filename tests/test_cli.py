"""Tests for the click CLI."""

from unittest.mock import patch

from click.testing import CliRunner

from fakes import FakeGateway
from solace.cli import main
from solace.service import build_service


def test_check_alert():
    result = CliRunner().invoke(main, ["check", "please help me"])
    assert result.exit_code == 2
    assert "ALERT" in result.output


def test_check_ok():
    result = CliRunner().invoke(main, ["check", "all good here"])
    assert result.exit_code == 0
    assert "OK" in result.output


def test_check_custom_keywords_only():
    runner = CliRunner()
    result = runner.invoke(main, ["check", "--no-defaults", "-k", "stalker", "help!"])
    assert result.exit_code == 0
    result = runner.invoke(main, ["check", "--no-defaults", "-k", "stalker", "a stalker"])
    assert result.exit_code == 2


def test_keywords_lists_defaults():
    result = CliRunner().invoke(main, ["keywords"])
    assert result.exit_code == 0
    for kw in ("help", "emergency", "danger", "unsafe"):
        assert kw in result.output


def test_chat_prints_reply_and_alert():
    service = build_service(gateway=FakeGateway(reply="You're safe to talk here."))
    with patch("solace.service.build_service", return_value=service):
        result = CliRunner().invoke(main, ["chat", "I feel unsafe"])
    assert result.exit_code == 0
    assert "Safety alert" in result.output
    assert "You're safe to talk here." in result.output


def test_chat_not_configured(monkeypatch):
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    result = CliRunner().invoke(main, ["chat", "hello"])
    assert result.exit_code == 1
    assert "Chat failed" in result.output
