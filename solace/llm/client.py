"""LLM client wrapper for Solace.

Provides a small synchronous interface to the Anthropic Messages API with
token accounting.  Calls made without an API key raise
:class:`LLMNotConfiguredError`.
"""

from __future__ import annotations

import logging
import os
import time
from dataclasses import dataclass

import anthropic

from solace.config import DEFAULT_MODEL

logger = logging.getLogger(__name__)

NOT_CONFIGURED_MSG = "LLM not configured. Set ANTHROPIC_API_KEY."


class LLMNotConfiguredError(RuntimeError):
    """Raised when a completion is requested without an API key."""


# ---------------------------------------------------------------------------
# Response dataclass
# ---------------------------------------------------------------------------


@dataclass
class LLMResponse:
    """Structured response from an LLM call."""

    content: str
    model: str = ""
    input_tokens: int = 0
    output_tokens: int = 0
    total_tokens: int = 0
    latency_ms: int = 0


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------


class LLMClient:
    """Thin wrapper around the Anthropic Python SDK.

    Parameters
    ----------
    model : str
        Model identifier to use for completions.
    api_key : str | None
        Anthropic API key.  Falls back to the ``ANTHROPIC_API_KEY``
        environment variable when *None*.
    timeout : float
        Per-request timeout in seconds.
    max_retries : int
        How many times the SDK retries connection errors and 429/5xx replies.
    """

    def __init__(
        self,
        model: str = DEFAULT_MODEL,
        api_key: str | None = None,
        timeout: float = 60.0,
        max_retries: int = 2,
    ) -> None:
        self.model = model
        self.api_key = api_key or os.environ.get("ANTHROPIC_API_KEY", "")
        self._configured = bool(self.api_key)

        if self._configured:
            self._client = anthropic.Anthropic(
                api_key=self.api_key,
                timeout=timeout,
                max_retries=max_retries,
            )
        else:
            self._client = None  # type: ignore[assignment]

    # -- properties ----------------------------------------------------------

    @property
    def configured(self) -> bool:
        """Return *True* if an API key is available."""
        return self._configured

    # -- synchronous completion ----------------------------------------------

    def complete(
        self,
        prompt: str,
        system_prompt: str | None = None,
        max_tokens: int = 1024,
        temperature: float = 0.7,
    ) -> LLMResponse:
        """Send a single-turn completion request and return an :class:`LLMResponse`.

        Raises :class:`LLMNotConfiguredError` when no API key is set.  SDK errors
        (``anthropic.APIError`` and subclasses) propagate to the caller.
        """
        if not self._configured:
            raise LLMNotConfiguredError(NOT_CONFIGURED_MSG)

        kwargs: dict = {
            "model": self.model,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system_prompt:
            kwargs["system"] = system_prompt

        start = time.monotonic()
        response = self._client.messages.create(**kwargs)
        latency_ms = int((time.monotonic() - start) * 1000)

        input_tokens = response.usage.input_tokens
        output_tokens = response.usage.output_tokens
        content = "".join(
            block.text for block in response.content or [] if getattr(block, "type", "") == "text"
        )
        logger.debug(
            "LLM call model=%s tokens_in=%d tokens_out=%d latency_ms=%d",
            self.model,
            input_tokens,
            output_tokens,
            latency_ms,
        )

        return LLMResponse(
            content=content,
            model=self.model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            total_tokens=input_tokens + output_tokens,
            latency_ms=latency_ms,
        )
