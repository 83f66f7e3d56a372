"""Configuration management for expiryscan."""

from typing import Literal

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings


class StatusThresholds(BaseModel):
    """Day-count thresholds for classifying a resolved expiry date.

    Status bands (days remaining until the end of the expiry day):
        - expired: < 0
        - danger: 0 .. danger_days
        - soon: danger_days + 1 .. soon_days
        - safe: > soon_days

    Attributes:
        soon_days: Upper bound (inclusive) of the "soon" band (14 default).
        danger_days: Upper bound (inclusive) of the "danger" band (4 default).
    """

    soon_days: int = Field(
        default=14,
        ge=1,
        description="Days remaining at or below which a date is 'soon'",
    )
    danger_days: int = Field(
        default=4,
        ge=0,
        description="Days remaining at or below which a date is 'danger'",
    )

    @model_validator(mode="after")
    def validate_ordering(self) -> "StatusThresholds":
        """The danger band must sit strictly inside the soon band."""
        if self.danger_days >= self.soon_days:
            raise ValueError(
                f"danger_days ({self.danger_days}) must be less than "
                f"soon_days ({self.soon_days})."
            )
        return self


class Settings(BaseSettings):
    """expiryscan configuration loaded from environment variables.

    All settings can be overridden via environment variables with
    the EXPIRYSCAN_ prefix. For example:
        EXPIRYSCAN_YEAR_POLICY=forward
        EXPIRYSCAN_LOCALES='["en"]'
        EXPIRYSCAN_STATUS_THRESHOLDS__SOON_DAYS=30

    Year policy:
        A single year window applies to every strategy. "absolute" accepts
        min_year..max_year and keeps extraction independent of the clock.
        "forward" accepts reference_year..reference_year + forward_window_years,
        where reference_year defaults to the current year when the extractor
        is built.
    """

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_format: Literal["json", "text"] = Field(
        default="json",
        description="Log output format",
    )

    # Extraction
    locales: list[str] = Field(
        default_factory=lambda: ["en", "id"],
        min_length=1,
        description="Locale packs supplying keywords and month names, in lookup order",
    )
    year_policy: Literal["absolute", "forward"] = Field(
        default="absolute",
        description="Year acceptance window applied to every strategy",
    )
    min_year: int = Field(
        default=1900,
        ge=1,
        description="Lowest accepted year under the absolute policy",
    )
    max_year: int = Field(
        default=2050,
        ge=1,
        le=9999,
        description="Highest accepted year under the absolute policy",
    )
    forward_window_years: int = Field(
        default=20,
        ge=0,
        le=200,
        description="Years after reference_year accepted under the forward policy",
    )
    reference_year: int | None = Field(
        default=None,
        ge=1,
        description="First accepted year under the forward policy (None = current year)",
    )
    compact_yymmdd_fallback: bool = Field(
        default=False,
        description="Retry a 6-digit run as YYMMDD when DDMMYY fails validation",
    )

    # Frame confirmation
    confirmation_frames: int = Field(
        default=3,
        ge=1,
        description="Consecutive frames with the same date required to confirm it",
    )
    frame_interval: int = Field(
        default=10,
        ge=1,
        description="Only every Nth camera frame is sent for recognition",
    )

    # Status
    status_thresholds: StatusThresholds = Field(
        default_factory=StatusThresholds,
        description="Thresholds for expired/danger/soon/safe classification",
    )

    model_config = {
        "env_prefix": "EXPIRYSCAN_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",
    }

    @model_validator(mode="after")
    def validate_year_window(self) -> "Settings":
        """The absolute window must not be empty."""
        if self.min_year > self.max_year:
            raise ValueError(
                f"min_year ({self.min_year}) must not exceed max_year ({self.max_year})."
            )
        return self


# Global settings instance
settings = Settings()
