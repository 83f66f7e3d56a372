"""Expiry status models."""

from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .dates import ResolvedDate


class ExpiryStatus(str, Enum):
    """How close a product is to its expiration date."""

    SAFE = "safe"
    SOON = "soon"
    DANGER = "danger"
    EXPIRED = "expired"


class StatusReport(BaseModel):
    """Classification of a resolved date relative to a given day.

    Attributes:
        expiry: The resolved expiration date.
        today: The day the classification was made for.
        days_remaining: Calendar days from today to the expiry day
            (0 on the expiry day itself, negative once expired).
        status: Status band for days_remaining.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    expiry: ResolvedDate
    today: date
    days_remaining: int = Field(description="Negative once expired")
    status: ExpiryStatus

    @property
    def is_expired(self) -> bool:
        return self.status is ExpiryStatus.EXPIRED
