"""Safety keyword storage and detection."""

from solace.safety.keyword_store import DEFAULT_KEYWORDS, KeywordStore
from solace.safety.matcher import detect_safety_keywords
from solace.safety.models import SafetyKeyword

__all__ = [
    "DEFAULT_KEYWORDS",
    "KeywordStore",
    "SafetyKeyword",
    "detect_safety_keywords",
]
