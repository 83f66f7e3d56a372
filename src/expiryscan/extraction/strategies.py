"""The ordered strategy table.

Strategies are listed by descending confidence. Keyword-anchored forms
are close to unambiguous; bare numeric and compact forms are the most
failure-prone (a batch number can look like a date) and run last.

All patterns expect upper-cased, stripped text.

| tier    | strategy            | example                      |
|---------|---------------------|------------------------------|
| keyword | keyword_numeric     | EXP: 15/11/2025, ED 15 11 25 |
| keyword | keyword_month_year  | EXP 11/2027                  |
| keyword | keyword_compact     | BB 151127                    |
| keyword | keyword_month_name  | EXP NOV 2027, EXP 15 NOV 27  |
| bare    | numeric_delimited   | 15.11.2025, 15-11-25         |
| bare    | iso_delimited       | 2027-11-15                   |
| bare    | numeric_spaced      | 15 11 2027                   |
| bare    | compact_digits      | 151127, 15112027             |
| bare    | month_name          | 15-NOV-2027, NOV152027       |
| bare    | month_year          | 11/2027, 11 2027, 2027.11    |
| bare    | compact_month_year  | 1127                         |
| bare    | embedded_dotted     | 240515015.11.2027            |
"""

from __future__ import annotations

from collections.abc import Sequence

from expiryscan.models import StrategyTier

from .base import PatternStrategy, Strategy
from .locales import ENGLISH, INDONESIAN, LocalePack, anchor_pattern

# Between numeric groups after a keyword: one delimiter (optionally
# padded) or plain whitespace
_KW_SEP = r"(?:\s*[/.\-]\s*|\s+)"
# Around month names
_NAME_SEP = r"[\s.\-/,]*"
_MONTH_NAME = r"(?P<month>[A-Z]{3,9})"
_YEAR_2_4 = r"(?P<year>\d{2,4})(?!\d)"
_YEAR_2_OR_4 = r"(?P<year>\d{4}|\d{2})(?!\d)"
# Not glued to a preceding number, directly or through a delimiter
_BARE_START = r"(?<!\d)(?<!\d[/.\-])"
# Not continued by another delimited number
_NO_CONTINUATION = r"(?!\d)(?![/.\-]\d)"


def keyword_strategies(
    packs: Sequence[LocalePack] = (ENGLISH, INDONESIAN),
    *,
    yymmdd_fallback: bool = False,
) -> list[Strategy]:
    """Strategies anchored on the expiry keywords of the given packs."""
    anchor = anchor_pattern(packs)
    tier = StrategyTier.KEYWORD
    return [
        PatternStrategy(
            "keyword_numeric",
            rf"{anchor}(?P<day>\d{{1,2}}){_KW_SEP}(?P<month>\d{{1,2}}){_KW_SEP}{_YEAR_2_4}",
            tier,
        ),
        PatternStrategy(
            "keyword_month_year",
            rf"{anchor}(?P<month>\d{{1,2}}){_KW_SEP}{_YEAR_2_OR_4}(?!{_KW_SEP}\d)",
            tier,
        ),
        PatternStrategy(
            "keyword_compact",
            rf"{anchor}(?P<digits>\d{{8}}|\d{{6}})(?!\d)",
            tier,
            yymmdd_fallback=yymmdd_fallback,
        ),
        PatternStrategy(
            "keyword_month_name",
            [
                rf"{anchor}(?P<day>\d{{1,2}}){_NAME_SEP}{_MONTH_NAME}{_NAME_SEP}{_YEAR_2_OR_4}",
                rf"{anchor}{_MONTH_NAME}{_NAME_SEP}(?P<day>\d{{1,2}}){_NAME_SEP}(?P<year>\d{{4}})(?!\d)",
                rf"{anchor}{_MONTH_NAME}{_NAME_SEP}{_YEAR_2_OR_4}",
            ],
            tier,
        ),
    ]


def bare_strategies(*, yymmdd_fallback: bool = False) -> list[Strategy]:
    """Strategies that need no keyword, lowest confidence last."""
    return [
        PatternStrategy(
            "numeric_delimited",
            rf"{_BARE_START}(?P<day>\d{{1,2}})(?P<sep>[/.\-])(?P<month>\d{{1,2}})(?P=sep){_YEAR_2_4}",
        ),
        PatternStrategy(
            "iso_delimited",
            rf"{_BARE_START}(?P<year>\d{{4}})(?P<sep>[/.\-])(?P<month>\d{{1,2}})(?P=sep)(?P<day>\d{{1,2}})(?!\d)",
        ),
        PatternStrategy(
            "numeric_spaced",
            rf"{_BARE_START}(?<!\d\s)(?P<day>\d{{1,2}})\s+(?P<month>\d{{1,2}})\s+(?P<year>\d{{4}})(?!\d)",
        ),
        PatternStrategy(
            "compact_digits",
            r"(?<!\d)(?P<digits>\d{8}|\d{6})(?!\d)",
            yymmdd_fallback=yymmdd_fallback,
        ),
        PatternStrategy(
            "month_name",
            [
                rf"(?<!\d)(?P<day>\d{{1,2}}){_NAME_SEP}{_MONTH_NAME}{_NAME_SEP}{_YEAR_2_OR_4}",
                rf"(?<![A-Z]){_MONTH_NAME}{_NAME_SEP}(?P<day>\d{{1,2}}){_NAME_SEP}(?P<year>\d{{4}})(?!\d)",
                rf"(?<![A-Z]){_MONTH_NAME}{_NAME_SEP}{_YEAR_2_OR_4}",
            ],
        ),
        PatternStrategy(
            "month_year",
            [
                rf"{_BARE_START}(?P<month>\d{{1,2}})[/.\-](?P<year>\d{{4}}){_NO_CONTINUATION}",
                rf"{_BARE_START}(?<![\d/.\-]\s)(?P<month>\d{{1,2}})\s+(?P<year>\d{{4}})(?!\d)",
                rf"{_BARE_START}(?P<year>\d{{4}})\.(?P<month>\d{{1,2}}){_NO_CONTINUATION}",
            ],
        ),
        PatternStrategy(
            "compact_month_year",
            rf"{_BARE_START}(?P<digits>\d{{4}}){_NO_CONTINUATION}",
        ),
        PatternStrategy(
            "embedded_dotted",
            r"(?P<day>\d{2})\.(?P<month>\d{2})\.(?P<year>\d{4})(?!\d)",
            last_first=True,
        ),
    ]


def build_strategies(
    packs: Sequence[LocalePack] = (ENGLISH, INDONESIAN),
    *,
    yymmdd_fallback: bool = False,
) -> list[Strategy]:
    """Full cascade table: keyword strategies, then bare strategies."""
    return [
        *keyword_strategies(packs, yymmdd_fallback=yymmdd_fallback),
        *bare_strategies(yymmdd_fallback=yymmdd_fallback),
    ]


DEFAULT_STRATEGIES: tuple[Strategy, ...] = tuple(build_strategies())
