"""Chat orchestration."""

from solace.chat.pipeline import ChatPipeline, ChatState

__all__ = ["ChatPipeline", "ChatState"]
