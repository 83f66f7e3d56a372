"""Base classes for parsing strategies.

A strategy locates date-like substrings in one upper-cased candidate and
hands back the raw captured components. It does not judge calendar
correctness: resolution and validation decide whether a hit becomes a
date, and a rejected hit just lets the next hit or strategy run.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field

from expiryscan.models import DateComponents, ResolvedDate, StrategyTier

from .resolution import (
    DEFAULT_MONTH_NAMES,
    DEFAULT_WINDOW,
    YearWindow,
    resolve_components,
    split_compact,
)


class StrategyHit(BaseModel):
    """One pattern match and its possible component readings.

    Attributes:
        matched: The matched substring.
        interpretations: Component readings to try, most likely first.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    matched: str = Field(description="Matched substring")
    interpretations: tuple[DateComponents, ...] = Field(default=())


class StrategyMatch(BaseModel):
    """A hit that resolved to a valid date."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    matched: str
    components: DateComponents
    date: ResolvedDate


class Strategy(ABC):
    """Abstract base class for parsing strategies.

    Subclasses only need to implement find(). match() resolves hits in
    order and returns the first one that validates.

    Example:
        ```python
        class SlashStrategy(Strategy):
            name = "slash"
            tier = StrategyTier.BARE

            def find(self, text: str) -> Iterator[StrategyHit]:
                ...
        ```
    """

    name: str = "base"
    tier: StrategyTier = StrategyTier.BARE

    @abstractmethod
    def find(self, text: str) -> Iterator[StrategyHit]:
        """Yield every hit in text, in the order they should be tried.

        Args:
            text: An upper-cased, stripped candidate.
        """
        ...

    def match(
        self,
        text: str,
        *,
        window: YearWindow = DEFAULT_WINDOW,
        months: Mapping[str, int] = DEFAULT_MONTH_NAMES,
    ) -> StrategyMatch | None:
        """Return the first hit whose components resolve to a valid date.

        Args:
            text: An upper-cased, stripped candidate.
            window: Accepted year range.
            months: Month-name table.

        Returns:
            StrategyMatch, or None when nothing matched or validated.
        """
        for hit in self.find(text):
            for components in hit.interpretations:
                resolved = resolve_components(components, window=window, months=months)
                if resolved is not None:
                    return StrategyMatch(matched=hit.matched, components=components, date=resolved)
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, tier={self.tier.value!r})"


class PatternStrategy(Strategy):
    """Strategy defined by an ordered group of regular expressions.

    Patterns are tried in the order given; all matches of one pattern are
    offered before the next pattern runs. The capture mapping is
    expressed through named groups:

    - ``day``, ``month``, ``year``: taken as-is (day optional).
    - ``digits``: an unseparated run split by split_compact().

    Attributes:
        name: Strategy name reported in ExpirationMatch.strategy.
        tier: KEYWORD or BARE.
        patterns: Compiled patterns, applied to upper-cased text.
        last_first: Try matches from the end of the text backwards.
        yymmdd_fallback: Also read 6-digit runs as YYMMDD.
    """

    def __init__(
        self,
        name: str,
        patterns: str | re.Pattern[str] | Sequence[str | re.Pattern[str]],
        tier: StrategyTier = StrategyTier.BARE,
        *,
        last_first: bool = False,
        yymmdd_fallback: bool = False,
    ) -> None:
        if isinstance(patterns, (str, re.Pattern)):
            patterns = [patterns]
        self.name = name
        self.tier = tier
        self.patterns: tuple[re.Pattern[str], ...] = tuple(
            re.compile(p) if isinstance(p, str) else p for p in patterns
        )
        self.last_first = last_first
        self.yymmdd_fallback = yymmdd_fallback

    def find(self, text: str) -> Iterator[StrategyHit]:
        for pattern in self.patterns:
            matches = list(pattern.finditer(text))
            if self.last_first:
                matches.reverse()
            for m in matches:
                interpretations = self._interpret(m)
                if interpretations:
                    yield StrategyHit(
                        matched=m.group(0).strip(),
                        interpretations=tuple(interpretations),
                    )

    def _interpret(self, m: re.Match[str]) -> list[DateComponents]:
        groups = m.groupdict()
        digits = groups.get("digits")
        if digits:
            return split_compact(digits, yymmdd_fallback=self.yymmdd_fallback)
        month = groups.get("month")
        year = groups.get("year")
        if not month or not year:
            return []
        return [DateComponents(day=groups.get("day") or None, month=month, year=year)]


class StrategyCascade:
    """Ordered table of strategies.

    Order is the confidence ranking: earlier strategies are more specific.
    Keyword strategies always precede bare ones.

    Attributes:
        strategies: The strategies, in cascade order.
    """

    def __init__(self, strategies: Sequence[Strategy] | None = None) -> None:
        """Initialize the cascade.

        Args:
            strategies: Strategies in cascade order. Defaults to empty.
        """
        self._strategies: list[Strategy] = list(strategies) if strategies else []

    @property
    def strategies(self) -> list[Strategy]:
        """Get the list of strategies."""
        return self._strategies

    @property
    def keyword_strategies(self) -> list[Strategy]:
        """Strategies anchored on an expiry keyword, in order."""
        return [s for s in self._strategies if s.tier is StrategyTier.KEYWORD]

    @property
    def bare_strategies(self) -> list[Strategy]:
        """Strategies that need no keyword, in order."""
        return [s for s in self._strategies if s.tier is StrategyTier.BARE]

    @property
    def names(self) -> list[str]:
        return [s.name for s in self._strategies]

    def add_strategy(self, strategy: Strategy) -> None:
        """Append a strategy at the lowest confidence position.

        Args:
            strategy: Strategy to add.
        """
        self._strategies.append(strategy)

    def __iter__(self) -> Iterator[Strategy]:
        return iter(self._strategies)

    def __len__(self) -> int:
        return len(self._strategies)
