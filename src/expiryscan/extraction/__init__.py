"""Expiration-date extraction from OCR text fragments.

Deterministic pattern matching only: a prioritized list of candidates is
run through an ordered cascade of strategies, and the first match that
resolves to a valid calendar date wins.

Example:
    ```python
    from expiryscan.extraction import DateExtractor, extract_expiration_date

    extract_expiration_date(["05/12/2025", "EXP 15/11/2025"])
    # ResolvedDate(year=2025, month=11, day=15)

    extractor = DateExtractor(locales=["en"])
    match = extractor.extract(["BATCH 240115", "EXP NOV 2027"])
    # match.strategy == "keyword_month_name"
    ```
"""

from .base import PatternStrategy, Strategy, StrategyCascade, StrategyHit, StrategyMatch
from .extractor import DateExtractor, default_extractor, extract_expiration_date, try_parse
from .locales import (
    DEFAULT_LOCALES,
    ENGLISH,
    INDONESIAN,
    LocalePack,
    anchor_pattern,
    available_locales,
    get_locale_pack,
    register_locale_pack,
    resolve_locale_packs,
)
from .prioritize import DEFAULT_PRIORITY_KEYWORDS, has_priority_keyword, prioritize
from .resolution import (
    DEFAULT_WINDOW,
    PIVOT_YEAR,
    YearWindow,
    is_valid_date,
    normalize_year,
    parse_month,
    resolve,
    resolve_components,
    split_compact,
)
from .strategies import DEFAULT_STRATEGIES, bare_strategies, build_strategies, keyword_strategies

__all__ = [
    # Base classes
    "Strategy",
    "PatternStrategy",
    "StrategyCascade",
    "StrategyHit",
    "StrategyMatch",
    # Extractor
    "DateExtractor",
    "default_extractor",
    "extract_expiration_date",
    "try_parse",
    # Locales
    "DEFAULT_LOCALES",
    "ENGLISH",
    "INDONESIAN",
    "LocalePack",
    "anchor_pattern",
    "available_locales",
    "get_locale_pack",
    "register_locale_pack",
    "resolve_locale_packs",
    # Prioritization
    "DEFAULT_PRIORITY_KEYWORDS",
    "has_priority_keyword",
    "prioritize",
    # Resolution
    "DEFAULT_WINDOW",
    "PIVOT_YEAR",
    "YearWindow",
    "is_valid_date",
    "normalize_year",
    "parse_month",
    "resolve",
    "resolve_components",
    "split_compact",
    # Strategy table
    "DEFAULT_STRATEGIES",
    "bare_strategies",
    "build_strategies",
    "keyword_strategies",
]
