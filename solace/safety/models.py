"""Data models for safety keywords."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass
class SafetyKeyword:
    """A word or phrase that marks a chat message as a safety alert."""

    id: str
    keyword: str
    is_active: bool = True
    created_at: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            self.id = uuid.uuid4().hex
        if not self.created_at:
            self.created_at = datetime.now(timezone.utc).isoformat()
