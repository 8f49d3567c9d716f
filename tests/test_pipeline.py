"""Tests for the chat pipeline."""

import logging
import pytest

from solace.chat.pipeline import ChatPipeline, ChatState
from solace.conversations.log import ConversationLog
from solace.errors import UpstreamError, ValidationError
from solace.safety.keyword_store import KeywordStore

from fakes import FakeGateway


def _pipeline(gateway=None, seed=("help",)):
    gateway = gateway or FakeGateway()
    return ChatPipeline(KeywordStore(seed=seed), gateway, ConversationLog()), gateway


def test_alert_scenario_with_toggle():
    pipeline, _ = _pipeline()
    help_kw = pipeline.keywords.list_all()[0]

    assert pipeline.submit("I need some help now").is_safety_alert is True
    assert pipeline.submit("I'm doing fine").is_safety_alert is False

    pipeline.keywords.set_active(help_kw.id, False)
    assert pipeline.submit("I need some help now").is_safety_alert is False

    pipeline.keywords.set_active(help_kw.id, True)
    assert pipeline.submit("I need some help now").is_safety_alert is True


def test_returns_logged_entry():
    pipeline, gateway = _pipeline(FakeGateway(reply="You are not alone."))
    entry = pipeline.submit("rough day")
    assert entry.user_message == "rough day"
    assert entry.ai_response == "You are not alone."
    assert pipeline.log.list_all() == [entry]
    assert gateway.calls == ["rough day"]


def test_gateway_receives_only_latest_message():
    pipeline, gateway = _pipeline()
    pipeline.submit("first")
    pipeline.submit("second")
    assert gateway.calls == ["first", "second"]


@pytest.mark.parametrize("bad", ["", None, 42, ["help"]])
def test_invalid_message_rejected_before_gateway(bad):
    pipeline, gateway = _pipeline()
    with pytest.raises(ValidationError):
        pipeline.submit(bad)
    assert gateway.calls == []
    assert len(pipeline.log) == 0


def test_upstream_failure_logs_nothing():
    pipeline, gateway = _pipeline(FakeGateway(error=UpstreamError("down")))
    with pytest.raises(UpstreamError):
        pipeline.submit("help me")
    assert len(gateway.calls) == 1
    assert pipeline.log.list_all() == []


def test_unexpected_gateway_error_becomes_upstream_error():
    pipeline, _ = _pipeline(FakeGateway(error=RuntimeError("boom")))
    with pytest.raises(UpstreamError) as excinfo:
        pipeline.submit("hello")
    assert isinstance(excinfo.value.__cause__, RuntimeError)
    assert len(pipeline.log) == 0


def test_no_retry_on_failure():
    pipeline, gateway = _pipeline(FakeGateway(error=UpstreamError("down")))
    with pytest.raises(UpstreamError):
        pipeline.submit("hello")
    assert len(gateway.calls) == 1


def test_past_entries_keep_their_flag():
    pipeline, _ = _pipeline()
    first = pipeline.submit("help")
    pipeline.keywords.set_active(pipeline.keywords.list_all()[0].id, False)
    pipeline.submit("help")
    entries = pipeline.log.list_all()
    assert entries[0].id == first.id
    assert entries[0].is_safety_alert is True
    assert entries[1].is_safety_alert is False


def test_newly_added_keyword_applies_to_next_message():
    pipeline, _ = _pipeline(seed=())
    assert pipeline.submit("someone is following me").is_safety_alert is False
    pipeline.keywords.add("following")
    assert pipeline.submit("someone is following me").is_safety_alert is True


def test_whitespace_message_is_logged_without_alert():
    pipeline, gateway = _pipeline()
    entry = pipeline.submit("   ")
    assert entry.user_message == "   "
    assert entry.is_safety_alert is False
    assert pipeline.log.list_all() == [entry]
    assert gateway.calls == ["   "]


def _transitions(caplog):
    prefix = "Chat state "
    return [
        r.getMessage()[len(prefix):]
        for r in caplog.records
        if r.name == "solace.chat.pipeline" and r.getMessage().startswith(prefix)
    ]


def test_successful_turn_walks_every_state(caplog):
    caplog.set_level(logging.DEBUG, logger="solace.chat.pipeline")
    pipeline, _ = _pipeline()
    pipeline.submit("hello")
    assert _transitions(caplog) == [
        f"{ChatState.RECEIVED.value} -> {ChatState.KEYWORD_CHECKED.value}",
        f"{ChatState.KEYWORD_CHECKED.value} -> {ChatState.RESPONSE_OBTAINED.value}",
        f"{ChatState.RESPONSE_OBTAINED.value} -> {ChatState.LOGGED.value}",
        f"{ChatState.LOGGED.value} -> {ChatState.COMPLETED.value}",
    ]


def test_rejected_message_moves_to_failed(caplog):
    caplog.set_level(logging.DEBUG, logger="solace.chat.pipeline")
    pipeline, _ = _pipeline()
    with pytest.raises(ValidationError):
        pipeline.submit("")
    assert _transitions(caplog) == ["received -> failed"]


def test_upstream_failure_moves_to_failed(caplog):
    caplog.set_level(logging.DEBUG, logger="solace.chat.pipeline")
    pipeline, _ = _pipeline(FakeGateway(error=UpstreamError("down")))
    with pytest.raises(UpstreamError):
        pipeline.submit("hello")
    assert _transitions(caplog) == ["received -> keyword_checked", "keyword_checked -> failed"]
