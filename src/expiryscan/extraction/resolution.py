"""Component resolution and calendar validation.

Turns the raw strings captured by a strategy into a ResolvedDate:

1. Month: digits are parsed directly, letters are looked up in the month
   table of the enabled locale packs.
2. Day: defaults to 1 when the strategy captured none.
3. Year: two-digit years go through a fixed century pivot.
4. Validation: month 1-12, day within the month (Gregorian leap rule),
   year inside the configured YearWindow.

Every failure returns None. Nothing here raises for bad input text.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, model_validator

from expiryscan.exceptions import ConfigurationError
from expiryscan.models import DateComponents, ResolvedDate, days_in_month

from .locales import ENGLISH, INDONESIAN, merged_month_names

if TYPE_CHECKING:
    from expiryscan.config import Settings

logger = logging.getLogger(__name__)

# Two-digit years below the pivot land in the 2000s, the rest in the 1900s.
# The pivot does not move with the clock: "51" scanned in 2051 still resolves to 1951.
PIVOT_YEAR = 50

DEFAULT_MONTH_NAMES: Mapping[str, int] = merged_month_names((ENGLISH, INDONESIAN))


class YearWindow(BaseModel):
    """Inclusive range of accepted years.

    One window applies to every strategy of an extractor.

    Attributes:
        min_year: Lowest accepted year.
        max_year: Highest accepted year.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    min_year: int = Field(ge=1)
    max_year: int = Field(le=9999)

    @model_validator(mode="after")
    def _check_order(self) -> YearWindow:
        if self.min_year > self.max_year:
            raise ValueError(f"min_year ({self.min_year}) exceeds max_year ({self.max_year})")
        return self

    @classmethod
    def absolute(cls, min_year: int = 1900, max_year: int = 2050) -> YearWindow:
        """Fixed window, independent of the clock."""
        return cls(min_year=min_year, max_year=max_year)

    @classmethod
    def forward(cls, reference_year: int | None = None, span: int = 20) -> YearWindow:
        """Window starting at reference_year (default: current year)."""
        start = reference_year if reference_year is not None else date.today().year
        return cls(min_year=start, max_year=start + span)

    @classmethod
    def from_settings(cls, settings: Settings) -> YearWindow:
        """Build the window selected by a Settings instance.

        Raises:
            ConfigurationError: If the configured bounds are unusable.
        """
        policy = settings.year_policy
        try:
            if policy == "forward":
                return cls.forward(settings.reference_year, settings.forward_window_years)
            if policy == "absolute":
                return cls.absolute(settings.min_year, settings.max_year)
        except ValueError as e:
            raise ConfigurationError(f"Invalid year window: {e}") from e
        raise ConfigurationError(f"Unknown year policy: {policy}")

    def contains(self, year: int) -> bool:
        return self.min_year <= year <= self.max_year


DEFAULT_WINDOW = YearWindow.absolute()


def normalize_year(year: int) -> int:
    """Expand a two-digit year with the fixed pivot; leave others alone.

    Example:
        ```python
        normalize_year(25)    # 2025
        normalize_year(72)    # 1972
        normalize_year(2031)  # 2031
        ```
    """
    if year < 100:
        return 2000 + year if year < PIVOT_YEAR else 1900 + year
    return year


def parse_month(token: str, months: Mapping[str, int] = DEFAULT_MONTH_NAMES) -> int | None:
    """Month number for a numeric or named month token, or None."""
    token = token.strip().upper().rstrip(".")
    if not token:
        return None
    if token.isdecimal():
        return int(token)
    return months.get(token)


def is_valid_date(day: int, month: int, year: int, window: YearWindow = DEFAULT_WINDOW) -> bool:
    """Check day, month and year against the calendar and the year window."""
    if not 1 <= month <= 12:
        return False
    if not 1 <= day <= days_in_month(month, year):
        return False
    return window.contains(year)


def resolve(
    day: str | None,
    month: str,
    year: str,
    *,
    window: YearWindow = DEFAULT_WINDOW,
    months: Mapping[str, int] = DEFAULT_MONTH_NAMES,
) -> ResolvedDate | None:
    """Resolve captured strings into a validated date.

    Args:
        day: Day digits, or None to default to the first of the month.
        month: Month digits or a month-name token.
        year: Year digits (two-digit years are pivoted).
        window: Accepted year range.
        months: Month-name table.

    Returns:
        The ResolvedDate, or None if any component is unusable or the
        date fails validation.
    """
    month_number = parse_month(month, months)
    if month_number is None:
        logger.debug("Unknown month token %r", month)
        return None

    if day is None:
        day_number = 1
    elif day.strip().isdecimal():
        day_number = int(day)
    else:
        return None

    if not year.strip().isdecimal():
        return None
    full_year = normalize_year(int(year))

    if not is_valid_date(day_number, month_number, full_year, window):
        logger.debug(
            "Rejected components day=%s month=%s year=%s",
            day_number,
            month_number,
            full_year,
        )
        return None

    return ResolvedDate(year=full_year, month=month_number, day=day_number)


def resolve_components(
    components: DateComponents,
    *,
    window: YearWindow = DEFAULT_WINDOW,
    months: Mapping[str, int] = DEFAULT_MONTH_NAMES,
) -> ResolvedDate | None:
    """resolve() for a DateComponents record."""
    return resolve(
        components.day,
        components.month,
        components.year,
        window=window,
        months=months,
    )


def split_compact(digits: str, *, yymmdd_fallback: bool = False) -> list[DateComponents]:
    """Split an unseparated digit run into candidate components.

    Interpretations, in the order they should be tried:
        - 4 digits: MMYY (day defaults to 1)
        - 6 digits: DDMMYY, then YYMMDD if yymmdd_fallback is set
        - 8 digits: DDMMYYYY

    Other lengths yield nothing.
    """
    if not digits.isdecimal():
        return []
    if len(digits) == 4:
        return [DateComponents(month=digits[:2], year=digits[2:])]
    if len(digits) == 6:
        interpretations = [DateComponents(day=digits[:2], month=digits[2:4], year=digits[4:])]
        if yymmdd_fallback:
            interpretations.append(
                DateComponents(day=digits[4:], month=digits[2:4], year=digits[:2])
            )
        return interpretations
    if len(digits) == 8:
        return [DateComponents(day=digits[:2], month=digits[2:4], year=digits[4:])]
    return []
