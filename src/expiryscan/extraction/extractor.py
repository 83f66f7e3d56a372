"""Expiration-date extractor.

Given the text fragments one camera frame produced, finds the fragment
most likely to carry the expiration date and resolves it:

1. Prioritize: fragments with an expiry keyword go first.
2. Keyword strategies, candidate by candidate: every keyword strategy is
   tried on the first candidate before moving to the next one.
3. Bare strategies, strategy by strategy: each bare strategy is tried on
   every candidate before the next (less reliable) strategy runs.
4. The first hit that resolves and validates wins.

The extractor is stateless after construction. It never raises for text
input; "no date found" is returned as None.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING

from expiryscan.logging import get_logger
from expiryscan.models import ExpirationMatch, ResolvedDate

from .base import Strategy, StrategyCascade
from .locales import LocalePack, merged_keywords, merged_month_names, resolve_locale_packs
from .prioritize import prioritize
from .resolution import YearWindow
from .strategies import build_strategies

if TYPE_CHECKING:
    from expiryscan.config import Settings

logger = get_logger(__name__)


class DateExtractor:
    """Find and resolve an expiration date in OCR text fragments.

    Example:
        ```python
        extractor = DateExtractor()
        match = extractor.extract(["PARACETAMOL 500MG", "EXP 15/11/2025"])
        # match.date.isoformat() == "2025-11-15"
        # match.strategy == "keyword_numeric"
        ```

    Attributes:
        packs: Locale packs supplying keywords and month names.
        window: Accepted year range, shared by every strategy.
        cascade: The ordered strategy table.
    """

    def __init__(
        self,
        locales: Iterable[str] | None = None,
        *,
        window: YearWindow | None = None,
        yymmdd_fallback: bool = False,
        strategies: Sequence[Strategy] | None = None,
    ) -> None:
        """Initialize the extractor.

        Args:
            locales: Locale pack codes, in lookup order. Defaults to ("en", "id").
            window: Year window. Defaults to the absolute 1900-2050 window.
            yymmdd_fallback: Retry 6-digit runs as YYMMDD when DDMMYY fails.
            strategies: Custom strategy table, replacing the built-in one.

        Raises:
            UnknownLocaleError: If a locale code is not registered.
        """
        self.packs: tuple[LocalePack, ...] = resolve_locale_packs(locales)
        self.window = window if window is not None else YearWindow.absolute()
        self.cascade = StrategyCascade(
            strategies
            if strategies is not None
            else build_strategies(self.packs, yymmdd_fallback=yymmdd_fallback)
        )
        self._keywords = merged_keywords(self.packs)
        self._months: Mapping[str, int] = merged_month_names(self.packs)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> DateExtractor:
        """Build an extractor from Settings (the global instance by default)."""
        if settings is None:
            from expiryscan.config import settings as global_settings

            settings = global_settings
        return cls(
            settings.locales,
            window=YearWindow.from_settings(settings),
            yymmdd_fallback=settings.compact_yymmdd_fallback,
        )

    def try_parse(self, text: str) -> ExpirationMatch | None:
        """Run the whole cascade on a single candidate.

        Args:
            text: One recognized text fragment.

        Returns:
            The first strategy match that validates, or None.
        """
        if not isinstance(text, str):
            return None
        cleaned = text.strip().upper()
        if not cleaned:
            return None
        for strategy in self.cascade:
            match = self._attempt(strategy, text, cleaned)
            if match is not None:
                return match
        return None

    def extract(self, candidates: Sequence[str] | None) -> ExpirationMatch | None:
        """Extract the most likely expiration date from one frame's text.

        Args:
            candidates: Recognized text fragments, in OCR order. Items
                that are not strings are ignored.

        Returns:
            ExpirationMatch for the winning candidate, or None when no
            candidate holds a valid date.
        """
        if isinstance(candidates, str):
            candidates = [candidates]
        texts = [c for c in candidates or () if isinstance(c, str)]
        if not texts:
            logger.debug("No candidates supplied")
            return None

        ordered = [
            (original, cleaned)
            for original in prioritize(texts, self._keywords)
            if (cleaned := original.strip().upper())
        ]

        for original, cleaned in ordered:
            for strategy in self.cascade.keyword_strategies:
                match = self._attempt(strategy, original, cleaned)
                if match is not None:
                    return match

        for strategy in self.cascade.bare_strategies:
            for original, cleaned in ordered:
                match = self._attempt(strategy, original, cleaned)
                if match is not None:
                    return match

        logger.debug("No valid expiration date found", candidates=len(texts))
        return None

    def _attempt(self, strategy: Strategy, original: str, cleaned: str) -> ExpirationMatch | None:
        result = strategy.match(cleaned, window=self.window, months=self._months)
        if result is None:
            return None
        if result.components.two_digit_year:
            logger.debug(
                "Two-digit year resolved by pivot",
                year=result.components.year,
                resolved_year=result.date.year,
            )
        logger.debug(
            "Expiration date found",
            strategy=strategy.name,
            tier=strategy.tier.value,
            matched=result.matched,
            date=result.date.isoformat(),
        )
        return ExpirationMatch(
            date=result.date,
            text=original,
            matched=result.matched,
            strategy=strategy.name,
            tier=strategy.tier,
            components=result.components,
        )


_default_extractor: DateExtractor | None = None


def default_extractor() -> DateExtractor:
    """Shared extractor built from the global Settings on first use."""
    global _default_extractor
    if _default_extractor is None:
        _default_extractor = DateExtractor.from_settings()
    return _default_extractor


def extract_expiration_date(candidates: Sequence[str] | None) -> ResolvedDate | None:
    """Resolve the expiration date in a frame's text, or None.

    Uses default_extractor(). Empty input returns None without running
    any strategy.
    """
    match = default_extractor().extract(candidates)
    return match.date if match is not None else None


def try_parse(text: str) -> ResolvedDate | None:
    """Resolve the expiration date in a single fragment, or None."""
    match = default_extractor().try_parse(text)
    return match.date if match is not None else None
