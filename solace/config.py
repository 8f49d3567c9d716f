"""Environment-driven settings for the companion service.

Every value has a default so the API can start without configuration; a
missing ``ANTHROPIC_API_KEY`` only disables the chat responder.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from solace.errors import ValidationError

DEFAULT_MODEL = "claude-sonnet-4-5-20250929"


def _parse_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValidationError(f"{name} must be a number, got {raw!r}") from None


def _parse_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValidationError(f"{name} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ValidationError(f"{name} must not be negative, got {value}")
    return value


@dataclass
class Settings:
    """Runtime configuration.

    Parameters
    ----------
    anthropic_api_key : str
        Key for the completion service.  Empty means "not configured".
    model : str
        Model identifier passed to the completion service.
    max_tokens, temperature : int, float
        Generation parameters for each chat reply.
    llm_timeout : float
        Per-request timeout in seconds handed to the SDK client.
    llm_max_retries : int
        Retry count handed to the SDK client.
    log_level : str
        Level for the ``solace`` logger.
    cors_origins : list[str]
        Allowed origins for the browser client.
    """

    anthropic_api_key: str = ""
    model: str = DEFAULT_MODEL
    max_tokens: int = 1024
    temperature: float = 0.7
    llm_timeout: float = 60.0
    llm_max_retries: int = 2
    log_level: str = "INFO"
    cors_origins: list[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from *env* (defaults to ``os.environ``)."""
        env = os.environ if env is None else env
        origins = [o.strip() for o in env.get("SOLACE_CORS_ORIGINS", "*").split(",") if o.strip()]
        return cls(
            anthropic_api_key=env.get("ANTHROPIC_API_KEY", ""),
            model=env.get("SOLACE_MODEL", "").strip() or DEFAULT_MODEL,
            max_tokens=_parse_int(env, "SOLACE_MAX_TOKENS", 1024),
            temperature=_parse_float(env, "SOLACE_TEMPERATURE", 0.7),
            llm_timeout=_parse_float(env, "SOLACE_LLM_TIMEOUT", 60.0),
            llm_max_retries=_parse_int(env, "SOLACE_LLM_MAX_RETRIES", 2),
            log_level=env.get("SOLACE_LOG_LEVEL", "").strip().upper() or "INFO",
            cors_origins=origins or ["*"],
        )
