"""Chat pipeline -- one chat turn from inbound message to logged entry.

A request moves through ``Received -> KeywordChecked -> ResponseObtained ->
Logged -> Completed`` or stops in ``Failed``.  Nothing is written to the
conversation log unless the request completes.
"""

from __future__ import annotations

import logging
from enum import Enum

from solace.conversations.log import ConversationLog
from solace.conversations.models import ConversationEntry
from solace.errors import UpstreamError, ValidationError
from solace.llm.gateway import ResponderGateway
from solace.safety.keyword_store import KeywordStore
from solace.safety.matcher import detect_safety_keywords

logger = logging.getLogger(__name__)


class ChatState(str, Enum):
    """Stages a chat request passes through."""

    RECEIVED = "received"
    KEYWORD_CHECKED = "keyword_checked"
    RESPONSE_OBTAINED = "response_obtained"
    LOGGED = "logged"
    COMPLETED = "completed"
    FAILED = "failed"


class ChatPipeline:
    """Orchestrates keyword detection, reply generation and logging."""

    def __init__(
        self,
        keywords: KeywordStore,
        gateway: ResponderGateway,
        log: ConversationLog,
    ) -> None:
        self.keywords = keywords
        self.gateway = gateway
        self.log = log

    @staticmethod
    def _advance(current: ChatState, target: ChatState) -> ChatState:
        logger.debug("Chat state %s -> %s", current.value, target.value)
        return target

    def submit(self, message: str) -> ConversationEntry:
        """Run one chat turn and return the logged entry.

        Raises:
            ValidationError: *message* is not a non-empty string.
            UpstreamError: the gateway could not produce a reply.
        """
        state = ChatState.RECEIVED
        if not isinstance(message, str) or not message:
            state = self._advance(state, ChatState.FAILED)
            logger.warning("Rejected chat message: empty or not a string")
            raise ValidationError("Invalid message")
        logger.debug("Chat message received (%d chars)", len(message))

        active = self.keywords.list_active()
        is_alert = detect_safety_keywords(message, active)
        state = self._advance(state, ChatState.KEYWORD_CHECKED)
        if is_alert:
            logger.warning("Safety alert raised for incoming chat message")
        logger.debug("Alert=%s against %d active keywords", is_alert, len(active))

        try:
            reply = self.gateway.complete(message)
        except UpstreamError:
            state = self._advance(state, ChatState.FAILED)
            logger.error("Chat failed: upstream error")
            raise
        except Exception as exc:
            state = self._advance(state, ChatState.FAILED)
            logger.exception("Chat failed: unexpected gateway error")
            raise UpstreamError("Failed to get AI response") from exc
        state = self._advance(state, ChatState.RESPONSE_OBTAINED)

        entry = self.log.append(message, reply, is_alert)
        state = self._advance(state, ChatState.LOGGED)

        state = self._advance(state, ChatState.COMPLETED)
        logger.info("Chat turn %s %s (alert=%s)", entry.id, state.value, is_alert)
        return entry
