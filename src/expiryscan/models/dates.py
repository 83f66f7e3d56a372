"""Date models produced by the extraction engine."""

from __future__ import annotations

from datetime import date, datetime, time
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(month: int, year: int) -> int:
    """Number of days in a month, leap-year aware for February.

    Args:
        month: Month number 1-12.
        year: Four-digit year.

    Returns:
        Days in the month, or 0 for an out-of-range month.
    """
    if not 1 <= month <= 12:
        return 0
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


class StrategyTier(str, Enum):
    """Confidence tier of a parsing strategy."""

    KEYWORD = "keyword"  # Anchored on an expiry keyword, near-unambiguous
    BARE = "bare"  # No keyword, tried only after every keyword strategy failed


class DateComponents(BaseModel):
    """Raw captured strings from one successful pattern match.

    Day may be absent (defaults to 1 during resolution). Month is either
    numeric or a month-name token. Year has 2 to 4 digits.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    day: str | None = Field(default=None, description="Day digits, if captured")
    month: str = Field(min_length=1, description="Month digits or month name")
    year: str = Field(min_length=1, description="Year digits (2-4)")

    @property
    def two_digit_year(self) -> bool:
        """Whether the year must go through the fixed century pivot."""
        return len(self.year) <= 2


class ResolvedDate(BaseModel):
    """A calendar-valid expiration date.

    Expiration is treated as valid through the end of the stated day,
    see expires_at(). The year window is enforced during resolution, not
    here, so any Gregorian date can be represented.

    Attributes:
        year: Four-digit year.
        month: Month 1-12.
        day: Day of month, checked against the month length.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int = Field(ge=1, le=9999)
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)

    @model_validator(mode="after")
    def validate_day_in_month(self) -> ResolvedDate:
        """Reject day numbers past the end of the month (e.g. Feb 30)."""
        limit = days_in_month(self.month, self.year)
        if self.day > limit:
            raise ValueError(f"day {self.day} out of range for {self.year}-{self.month:02d}")
        return self

    @classmethod
    def from_date(cls, value: date) -> ResolvedDate:
        """Build from a datetime.date."""
        return cls(year=value.year, month=value.month, day=value.day)

    def as_date(self) -> date:
        """Return the stated day as a datetime.date."""
        return date(self.year, self.month, self.day)

    def expires_at(self) -> datetime:
        """Last second the product is still in date (naive, local time)."""
        return datetime.combine(self.as_date(), time(23, 59, 59))

    def isoformat(self) -> str:
        """ISO 8601 date string, e.g. "2027-11-01"."""
        return self.as_date().isoformat()

    def __str__(self) -> str:
        return self.isoformat()


class ExpirationMatch(BaseModel):
    """Result of a successful extraction.

    Attributes:
        date: The resolved expiration date.
        text: The candidate string the date was found in, as supplied.
        matched: The upper-cased substring the strategy pattern matched.
        strategy: Name of the winning strategy.
        tier: Confidence tier of the winning strategy.
        components: Raw captured components before resolution.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    date: ResolvedDate
    text: str
    matched: str
    strategy: str
    tier: StrategyTier
    components: DateComponents

    @property
    def ambiguous_year(self) -> bool:
        """True when the year was expanded from two digits."""
        return self.components.two_digit_year
