"""Free text to tsquery normalization.

normalize("John & Jane!") -> "john:* & jane:*". An empty result means the
caller must skip the text-search predicate; to_tsquery rejects empty input.
"""

import re

from pinboard.core.constants import AND_OPERATOR, MIN_TOKEN_LENGTH, PREFIX_MARKER

# Anything that is not a letter/digit or whitespace (underscore included, tsquery splits on it).
_NON_WORD_RE = re.compile(r"[^\w\s]|_")
_WHITESPACE_RE = re.compile(r"\s+")


def tokenize(raw_text: str) -> list[str]:
    """Return the lowercase search words of raw_text, single characters dropped."""
    cleaned = _NON_WORD_RE.sub(" ", raw_text.strip().lower())
    cleaned = _WHITESPACE_RE.sub(" ", cleaned).strip()
    if not cleaned:
        return []
    return [word for word in cleaned.split(" ") if len(word) >= MIN_TOKEN_LENGTH]


def normalize(raw_text: str | None) -> str:
    """Build a prefix-matching AND token query from raw_text.

    Idempotent: an existing token query normalizes to itself because the
    prefix markers and operators are stripped before being re-applied.

    Args:
        raw_text: User input from the search box (may be empty or None).

    Returns:
        Token query for to_tsquery, or "" when no searchable word remains.
    """
    if not raw_text:
        return ""
    return AND_OPERATOR.join(f"{word}{PREFIX_MARKER}" for word in tokenize(raw_text))
