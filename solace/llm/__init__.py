"""Solace LLM integration module.

Provides a thin wrapper around the Anthropic API and the responder gateway
used by the chat pipeline.
"""

from solace.llm.client import LLMClient, LLMNotConfiguredError, LLMResponse
from solace.llm.gateway import LLMResponderGateway, ResponderGateway

__all__ = [
    "LLMClient",
    "LLMNotConfiguredError",
    "LLMResponse",
    "LLMResponderGateway",
    "ResponderGateway",
]
