"""Safety keyword detection.

Matching is a plain case-insensitive substring test: "helping" matches
"help".  There is no stemming and no word-boundary handling.
"""

from __future__ import annotations

from typing import Iterable


def detect_safety_keywords(message: str, keywords: Iterable[str]) -> bool:
    """Return *True* if *message* contains any of *keywords*."""
    if not message:
        return False
    lowered = message.lower()
    return any(kw and kw.lower() in lowered for kw in keywords)
