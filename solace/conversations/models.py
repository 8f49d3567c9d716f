"""Data models for logged chat turns."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConversationEntry:
    """One completed chat turn.

    Immutable: entries are appended to the log and never edited.
    """

    id: str
    user_message: str
    ai_response: str
    is_safety_alert: bool
    created_at: str
