"""Conversation logging."""

from solace.conversations.log import ConversationLog
from solace.conversations.models import ConversationEntry

__all__ = ["ConversationEntry", "ConversationLog"]
