"""Responder gateways -- the boundary between the chat pipeline and the
text-completion service.

Every failure a gateway can hit (network, timeout, auth, quota, malformed
payload, missing configuration) surfaces as :class:`UpstreamError`.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import anthropic

from solace.config import Settings
from solace.errors import UpstreamError
from solace.llm.client import LLMClient, LLMNotConfiguredError
from solace.llm.prompts import COMPANION_SYSTEM_PROMPT, FALLBACK_RESPONSE

logger = logging.getLogger(__name__)


class ResponderGateway(ABC):
    """Produces a reply for a single chat message."""

    @abstractmethod
    def complete(self, message: str) -> str:
        """Return the reply text for *message*.

        Raises:
            UpstreamError: if no reply could be obtained.
        """


class LLMResponderGateway(ResponderGateway):
    """Single-turn responder backed by :class:`LLMClient`.

    Only the latest message is sent, together with a fixed system prompt;
    earlier turns are never forwarded.
    """

    def __init__(
        self,
        client: LLMClient,
        system_prompt: str = COMPANION_SYSTEM_PROMPT,
        max_tokens: int = 1024,
        temperature: float = 0.7,
    ) -> None:
        self.client = client
        self.system_prompt = system_prompt
        self.max_tokens = max_tokens
        self.temperature = temperature

    @classmethod
    def from_settings(cls, settings: Settings) -> "LLMResponderGateway":
        client = LLMClient(
            model=settings.model,
            api_key=settings.anthropic_api_key,
            timeout=settings.llm_timeout,
            max_retries=settings.llm_max_retries,
        )
        return cls(
            client,
            max_tokens=settings.max_tokens,
            temperature=settings.temperature,
        )

    @property
    def configured(self) -> bool:
        return self.client.configured

    def complete(self, message: str) -> str:
        try:
            resp = self.client.complete(
                prompt=message,
                system_prompt=self.system_prompt,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
            )
        except LLMNotConfiguredError as exc:
            logger.error("Completion requested but ANTHROPIC_API_KEY is not set")
            raise UpstreamError(str(exc)) from exc
        except anthropic.APIError as exc:
            logger.error("Completion service error: %s", type(exc).__name__)
            raise UpstreamError("Failed to get AI response") from exc
        except (AttributeError, TypeError) as exc:
            logger.error("Malformed completion payload: %s", exc)
            raise UpstreamError("Failed to get AI response") from exc

        if not resp.content.strip():
            logger.warning("Completion service returned no text, using fallback reply")
            return FALLBACK_RESPONSE
        return resp.content
