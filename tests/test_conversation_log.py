"""Tests for the append-only conversation log."""

import dataclasses
from datetime import datetime, timezone

import pytest

from solace.conversations import log as log_module
from solace.conversations.log import ConversationLog


def test_append_assigns_id_and_timestamp():
    log = ConversationLog()
    entry = log.append("hello", "hi there", False)
    assert entry.id
    assert entry.created_at
    assert entry.user_message == "hello"
    assert entry.ai_response == "hi there"
    assert entry.is_safety_alert is False


def test_list_all_is_ascending_and_append_only():
    log = ConversationLog()
    sizes = []
    for i in range(5):
        log.append(f"msg {i}", f"reply {i}", i % 2 == 0)
        sizes.append(len(log.list_all()))

    entries = log.list_all()
    assert sizes == [1, 2, 3, 4, 5]
    assert [e.user_message for e in entries] == [f"msg {i}" for i in range(5)]
    stamps = [e.created_at for e in entries]
    assert stamps == sorted(stamps)


def test_list_all_returns_snapshot():
    log = ConversationLog()
    log.append("one", "1", False)
    snapshot = log.list_all()
    log.append("two", "2", False)
    assert len(snapshot) == 1
    snapshot.clear()
    assert len(log) == 2


def test_entries_are_immutable():
    log = ConversationLog()
    entry = log.append("hello", "hi", False)
    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.ai_response = "changed"


def test_ids_are_unique():
    log = ConversationLog()
    ids = {log.append("m", "r", False).id for _ in range(20)}
    assert len(ids) == 20


class _SteppingClock:
    """Stands in for ``datetime`` and hands out a fixed sequence of times."""

    def __init__(self, *times):
        self._times = list(times)

    def now(self, tz=None):
        return self._times.pop(0)


def test_clock_stepping_backwards_keeps_order(monkeypatch):
    later = datetime(2024, 6, 1, 12, 0, 5, tzinfo=timezone.utc)
    earlier = datetime(2024, 6, 1, 11, 59, 0, tzinfo=timezone.utc)
    latest = datetime(2024, 6, 1, 12, 1, 0, tzinfo=timezone.utc)
    monkeypatch.setattr(log_module, "datetime", _SteppingClock(later, earlier, latest))

    log = ConversationLog()
    first = log.append("one", "1", False)
    second = log.append("two", "2", False)
    third = log.append("three", "3", False)

    assert first.created_at == later.isoformat()
    assert second.created_at == later.isoformat()
    assert third.created_at == latest.isoformat()
    stamps = [e.created_at for e in log.list_all()]
    assert stamps == sorted(stamps)
    assert [e.user_message for e in log.list_all()] == ["one", "two", "three"]
