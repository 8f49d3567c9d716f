"""Append-only, in-memory conversation log."""

from __future__ import annotations

import threading
import uuid
from datetime import datetime, timezone

from solace.conversations.models import ConversationEntry


class ConversationLog:
    """Ordered record of chat turns, oldest first."""

    def __init__(self) -> None:
        self._entries: list[ConversationEntry] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def append(
        self,
        user_message: str,
        ai_response: str,
        is_safety_alert: bool,
    ) -> ConversationEntry:
        """Record a chat turn and return the stored entry."""
        with self._lock:
            created_at = datetime.now(timezone.utc).isoformat()
            # Clock steps backwards must not break ascending order.
            if self._entries and created_at < self._entries[-1].created_at:
                created_at = self._entries[-1].created_at
            entry = ConversationEntry(
                id=uuid.uuid4().hex,
                user_message=user_message,
                ai_response=ai_response,
                is_safety_alert=bool(is_safety_alert),
                created_at=created_at,
            )
            self._entries.append(entry)
        return entry

    def list_all(self) -> list[ConversationEntry]:
        """Return a snapshot of every entry, ascending by creation time."""
        with self._lock:
            return list(self._entries)
