"""In-memory store for safety keywords.

A fresh store is seeded with the default keyword set.  Keywords can be
added and toggled on or off but never removed.
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable, Optional

from solace.errors import NotFoundError, ValidationError
from solace.safety.models import SafetyKeyword

logger = logging.getLogger(__name__)

DEFAULT_KEYWORDS: tuple[str, ...] = ("help", "emergency", "danger", "unsafe")


class KeywordStore:
    """Holds safety keywords keyed by id, in insertion order."""

    def __init__(self, seed: Optional[Iterable[str]] = DEFAULT_KEYWORDS) -> None:
        self._keywords: dict[str, SafetyKeyword] = {}
        self._lock = threading.Lock()
        for text in seed or ():
            self.add(text)

    def __len__(self) -> int:
        return len(self._keywords)

    # -- queries -------------------------------------------------------------

    def list_active(self) -> list[str]:
        """Return the text of every active keyword, in insertion order."""
        with self._lock:
            return [kw.keyword for kw in self._keywords.values() if kw.is_active]

    def list_all(self) -> list[SafetyKeyword]:
        """Return every keyword, newest first."""
        with self._lock:
            return list(reversed(list(self._keywords.values())))

    def get(self, keyword_id: str) -> SafetyKeyword:
        """Return the keyword with *keyword_id* or raise :class:`NotFoundError`."""
        with self._lock:
            keyword = self._keywords.get(keyword_id)
        if keyword is None:
            raise NotFoundError(f"Keyword '{keyword_id}' not found")
        return keyword

    # -- mutations -----------------------------------------------------------

    def add(self, text: str, is_active: bool = True) -> SafetyKeyword:
        """Create a keyword.  The text is stored exactly as given."""
        if not isinstance(text, str) or not text.strip():
            raise ValidationError("Keyword must be a non-empty string")
        if not isinstance(is_active, bool):
            raise ValidationError("isActive must be a boolean")
        keyword = SafetyKeyword(id="", keyword=text, is_active=is_active)
        with self._lock:
            self._keywords[keyword.id] = keyword
        logger.debug("Added safety keyword %s (active=%s)", keyword.id, is_active)
        return keyword

    def set_active(self, keyword_id: str, active: bool) -> SafetyKeyword:
        """Flip the active flag of an existing keyword."""
        if not isinstance(active, bool):
            raise ValidationError("isActive must be a boolean")
        with self._lock:
            existing = self._keywords.get(keyword_id)
            if existing is None:
                raise NotFoundError(f"Keyword '{keyword_id}' not found")
            updated = SafetyKeyword(
                id=existing.id,
                keyword=existing.keyword,
                is_active=active,
                created_at=existing.created_at,
            )
            self._keywords[keyword_id] = updated
        logger.info("Safety keyword %s set active=%s", keyword_id, active)
        return updated
