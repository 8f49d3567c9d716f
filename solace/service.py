"""Service facade -- the operations the HTTP API and the CLI call.

:func:`build_service` wires the stores, the responder gateway and the chat
pipeline together once per process (or once per test).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from solace.chat.pipeline import ChatPipeline
from solace.config import Settings
from solace.conversations.log import ConversationLog
from solace.conversations.models import ConversationEntry
from solace.llm.gateway import LLMResponderGateway, ResponderGateway
from solace.records.store import RecordStore
from solace.safety.keyword_store import KeywordStore
from solace.safety.models import SafetyKeyword

logger = logging.getLogger(__name__)


@dataclass
class CompanionService:
    """Owns every store for the lifetime of the process."""

    keywords: KeywordStore
    conversations: ConversationLog
    gateway: ResponderGateway
    records: RecordStore = field(default_factory=RecordStore)

    def __post_init__(self) -> None:
        self.pipeline = ChatPipeline(self.keywords, self.gateway, self.conversations)

    # -- chat ----------------------------------------------------------------

    def submit_chat_message(self, message: str) -> ConversationEntry:
        return self.pipeline.submit(message)

    def list_conversations(self) -> list[ConversationEntry]:
        return self.conversations.list_all()

    # -- safety keywords -----------------------------------------------------

    def list_safety_keywords(self) -> list[SafetyKeyword]:
        return self.keywords.list_all()

    def add_safety_keyword(self, text: str, is_active: bool = True) -> SafetyKeyword:
        return self.keywords.add(text, is_active=is_active)

    def set_safety_keyword_active(self, keyword_id: str, active: bool) -> SafetyKeyword:
        return self.keywords.set_active(keyword_id, active)


def build_service(
    settings: Optional[Settings] = None,
    gateway: Optional[ResponderGateway] = None,
) -> CompanionService:
    """Create a fresh service with seeded keywords and empty logs."""
    settings = settings or Settings.from_env()
    if gateway is None:
        gateway = LLMResponderGateway.from_settings(settings)
        if not gateway.configured:
            logger.warning("ANTHROPIC_API_KEY is not set; chat requests will fail")
    return CompanionService(
        keywords=KeywordStore(),
        conversations=ConversationLog(),
        gateway=gateway,
    )
