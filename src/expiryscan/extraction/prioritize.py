"""Candidate prioritization.

OCR returns text lines in no particular order. Lines carrying an expiry
keyword are far more likely to hold the real expiration date, so they are
tried first and the cascade can stop early.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .locales import ENGLISH, INDONESIAN, merged_keywords

DEFAULT_PRIORITY_KEYWORDS: tuple[str, ...] = merged_keywords((ENGLISH, INDONESIAN))


def has_priority_keyword(text: str, keywords: Iterable[str] = DEFAULT_PRIORITY_KEYWORDS) -> bool:
    """Case-insensitive containment check against the keyword set."""
    upper = text.upper()
    return any(keyword in upper for keyword in keywords)


def prioritize(
    candidates: Sequence[str],
    keywords: Iterable[str] = DEFAULT_PRIORITY_KEYWORDS,
) -> list[str]:
    """Move keyword-bearing candidates ahead of the rest.

    This is a stable partition, not a sort: relative order is preserved
    inside both groups.

    Args:
        candidates: Recognized text fragments in OCR order.
        keywords: Upper-case substrings marking a likely expiry line.

    Returns:
        A new list; the input is not modified.

    Example:
        ```python
        prioritize(["05/12/2025", "EXP 15/11/2025"])
        # ["EXP 15/11/2025", "05/12/2025"]
        ```
    """
    keywords = tuple(keywords)
    flagged: list[str] = []
    rest: list[str] = []
    for text in candidates:
        if has_priority_keyword(text, keywords):
            flagged.append(text)
        else:
            rest.append(text)
    return flagged + rest
