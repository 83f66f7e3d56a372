"""Data models for expiryscan.

Extraction Types:
    - DateComponents: Raw captured strings from one pattern match
    - ResolvedDate: Calendar-valid expiration date
    - ExpirationMatch: Resolved date plus the candidate and strategy it came from
    - StrategyTier: Keyword-anchored vs bare strategies

Status Types:
    - ExpiryStatus: safe / soon / danger / expired
    - StatusReport: Days remaining and status for one date
"""

from .dates import (
    DateComponents,
    ExpirationMatch,
    ResolvedDate,
    StrategyTier,
    days_in_month,
    is_leap_year,
)
from .status import ExpiryStatus, StatusReport

__all__ = [
    # Extraction types
    "DateComponents",
    "ExpirationMatch",
    "ResolvedDate",
    "StrategyTier",
    # Calendar helpers
    "days_in_month",
    "is_leap_year",
    # Status types
    "ExpiryStatus",
    "StatusReport",
]
