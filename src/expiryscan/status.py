"""Expiry status classification.

Turns a resolved expiration date into a day count and a status band
relative to a given day. Thresholds come from StatusThresholds:

    expired  days_remaining < 0
    danger   0 .. danger_days          (default 0-4)
    soon     danger_days+1 .. soon_days (default 5-14)
    safe     > soon_days               (default 15+)
"""

from __future__ import annotations

from datetime import date, datetime

from expiryscan.config import StatusThresholds
from expiryscan.models import ExpiryStatus, ResolvedDate, StatusReport

DEFAULT_THRESHOLDS = StatusThresholds()


def days_remaining(expiry: ResolvedDate, today: date | datetime | None = None) -> int:
    """Calendar days from today until the expiry day.

    The product is in date through the end of the expiry day, so this is
    0 on the expiry day itself and negative only after it.

    Args:
        expiry: The resolved expiration date.
        today: Reference day (a datetime is truncated to its date).
            Defaults to the local current date.
    """
    if today is None:
        today = date.today()
    elif isinstance(today, datetime):
        today = today.date()
    return (expiry.as_date() - today).days


def status_for(remaining: int, thresholds: StatusThresholds = DEFAULT_THRESHOLDS) -> ExpiryStatus:
    """Status band for a day count."""
    if remaining < 0:
        return ExpiryStatus.EXPIRED
    if remaining <= thresholds.danger_days:
        return ExpiryStatus.DANGER
    if remaining <= thresholds.soon_days:
        return ExpiryStatus.SOON
    return ExpiryStatus.SAFE


def classify(
    expiry: ResolvedDate,
    today: date | datetime | None = None,
    thresholds: StatusThresholds | None = None,
) -> StatusReport:
    """Classify an expiration date relative to today.

    Args:
        expiry: The resolved expiration date.
        today: Reference day. Defaults to the local current date.
        thresholds: Band thresholds. Defaults to settings.status_thresholds.

    Returns:
        StatusReport with days remaining and status.

    Example:
        ```python
        report = classify(ResolvedDate(year=2026, month=11, day=1), today=date(2026, 10, 19))
        # report.days_remaining == 13, report.status == ExpiryStatus.SOON
        ```
    """
    if thresholds is None:
        from expiryscan.config import settings

        thresholds = settings.status_thresholds
    if today is None:
        reference = date.today()
    elif isinstance(today, datetime):
        reference = today.date()
    else:
        reference = today
    remaining = days_remaining(expiry, reference)
    return StatusReport(
        expiry=expiry,
        today=reference,
        days_remaining=remaining,
        status=status_for(remaining, thresholds),
    )
