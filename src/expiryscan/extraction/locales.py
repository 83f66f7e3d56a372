"""Locale packs: expiry keywords and month names per language.

A pack bundles everything language-specific the cascade needs:

- priority_keywords: substrings that move a candidate to the front of the
  queue (plain, case-insensitive containment).
- anchors: label phrases a keyword-anchored strategy may start from.
  Multi-word phrases tolerate any run of spaces or dots between words.
  A phrase ending in ":" only anchors when the colon is present, which
  keeps single letters like "E" and "B" from anchoring on their own.
- month_names: upper-case month token to month number.

Additional locales are added with register_locale_pack(); the cascade
itself never changes.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from expiryscan.exceptions import UnknownLocaleError


class LocalePack(BaseModel):
    """Language-specific keyword and month-name tables.

    Attributes:
        code: Short locale code (e.g. "en", "id").
        name: Human-readable language name.
        priority_keywords: Substrings marking a likely expiry line.
        anchors: Label phrases keyword-anchored strategies start from.
        month_names: Upper-case month token to month number (1-12).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    code: str = Field(min_length=1)
    name: str = Field(default="")
    priority_keywords: tuple[str, ...] = Field(default=())
    anchors: tuple[str, ...] = Field(default=())
    month_names: dict[str, int] = Field(default_factory=dict)

    @field_validator("priority_keywords", "anchors")
    @classmethod
    def _upper_phrases(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(p.strip().upper() for p in value if p.strip())

    @field_validator("month_names")
    @classmethod
    def _upper_months(cls, value: dict[str, int]) -> dict[str, int]:
        normalized: dict[str, int] = {}
        for token, number in value.items():
            if not 1 <= number <= 12:
                raise ValueError(f"month number out of range for {token!r}: {number}")
            normalized[token.strip().upper()] = number
        return normalized


ENGLISH = LocalePack(
    code="en",
    name="English",
    priority_keywords=("EXP", "EXPIRE", "BEST", "USE BY", "BB", "BBD", "ED", "E:", "B:"),
    anchors=(
        "EXPIRATION",
        "EXPIRES",
        "EXPIRE",
        "EXPIRY",
        "EXP",
        "BEST BEFORE",
        "BEST BY",
        "USE BY",
        "BBD",
        "BB",
        "ED",
        "E:",
        "B:",
    ),
    month_names={
        "JAN": 1,
        "JANUARY": 1,
        "FEB": 2,
        "FEBRUARY": 2,
        "MAR": 3,
        "MARCH": 3,
        "APR": 4,
        "APRIL": 4,
        "MAY": 5,
        "JUN": 6,
        "JUNE": 6,
        "JUL": 7,
        "JULY": 7,
        "AUG": 8,
        "AUGUST": 8,
        "SEP": 9,
        "SEPT": 9,
        "SEPTEMBER": 9,
        "OCT": 10,
        "OCTOBER": 10,
        "NOV": 11,
        "NOVEMBER": 11,
        "DEC": 12,
        "DECEMBER": 12,
    },
)

INDONESIAN = LocalePack(
    code="id",
    name="Indonesian",
    priority_keywords=("KODE PRODUKSI", "BAIK DIGUNAKAN", "KADALUARSA", "KEDALUWARSA"),
    anchors=(
        "BAIK DIGUNAKAN SEBELUM",
        "KADALUARSA",
        "KEDALUWARSA",
        "KODE PRODUKSI",
    ),
    month_names={
        "JAN": 1,
        "JANUARI": 1,
        "FEB": 2,
        "FEBRUARI": 2,
        "MAR": 3,
        "MARET": 3,
        "APR": 4,
        "APRIL": 4,
        "MEI": 5,
        "JUN": 6,
        "JUNI": 6,
        "JUL": 7,
        "JULI": 7,
        "AGU": 8,
        "AGS": 8,
        "AGUSTUS": 8,
        "SEP": 9,
        "SEPTEMBER": 9,
        "OKT": 10,
        "OKTOBER": 10,
        "NOV": 11,
        "NOVEMBER": 11,
        "DES": 12,
        "DESEMBER": 12,
    },
)

_REGISTRY: dict[str, LocalePack] = {
    ENGLISH.code: ENGLISH,
    INDONESIAN.code: INDONESIAN,
}

DEFAULT_LOCALES: tuple[str, ...] = ("en", "id")


def register_locale_pack(pack: LocalePack, *, replace: bool = False) -> None:
    """Make a locale pack available by its code.

    Args:
        pack: The pack to register.
        replace: Overwrite an existing pack with the same code.

    Raises:
        ValueError: If the code is taken and replace is False.
    """
    if pack.code in _REGISTRY and not replace:
        raise ValueError(f"Locale pack already registered: {pack.code}")
    _REGISTRY[pack.code] = pack


def available_locales() -> list[str]:
    """Codes of all registered locale packs."""
    return sorted(_REGISTRY)


def get_locale_pack(code: str) -> LocalePack:
    """Look up a registered locale pack.

    Raises:
        UnknownLocaleError: If no pack is registered under code.
    """
    pack = _REGISTRY.get(code.strip().lower())
    if pack is None:
        raise UnknownLocaleError(code)
    return pack


def resolve_locale_packs(codes: Iterable[str] | None = None) -> tuple[LocalePack, ...]:
    """Look up several packs, keeping order and dropping duplicates."""
    packs: list[LocalePack] = []
    seen: set[str] = set()
    for code in codes if codes is not None else DEFAULT_LOCALES:
        pack = get_locale_pack(code)
        if pack.code not in seen:
            seen.add(pack.code)
            packs.append(pack)
    return tuple(packs)


def merged_keywords(packs: Iterable[LocalePack]) -> tuple[str, ...]:
    """Priority keywords of all packs, de-duplicated in pack order."""
    return tuple(dict.fromkeys(kw for pack in packs for kw in pack.priority_keywords))


def merged_month_names(packs: Iterable[LocalePack]) -> Mapping[str, int]:
    """Month tables of all packs. Earlier packs win on conflicting tokens."""
    merged: dict[str, int] = {}
    for pack in packs:
        for token, number in pack.month_names.items():
            merged.setdefault(token, number)
    return merged


def _phrase_pattern(phrase: str) -> str:
    if phrase.endswith(":"):
        return _phrase_pattern(phrase[:-1].rstrip()) + r"\s*:"
    return r"[\s.]*".join(re.escape(word) for word in phrase.split())


def anchor_pattern(packs: Iterable[LocalePack]) -> str:
    """Regex fragment matching any anchor of the given packs.

    The fragment refuses to start inside a word, accepts an optional
    trailing "DATE" label, and swallows trailing spaces and punctuation (. : / -)
    so a date pattern can follow directly.
    """
    phrases = {phrase for pack in packs for phrase in pack.anchors}
    if not phrases:
        # Never matches; keyword strategies become inert
        return r"(?!)"
    # Longest first so EXPIRES wins over EXP and BBD over BB
    ordered = sorted(phrases, key=lambda p: (-len(p), p))
    alternatives = "|".join(_phrase_pattern(p) for p in ordered)
    return rf"(?<![A-Z])(?:{alternatives})(?:[\s.]*DATE)?[\s.:/\-]*"
