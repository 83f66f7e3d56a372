"""Unit tests for expiryscan configuration."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from expiryscan.config import Settings, StatusThresholds
from expiryscan.exceptions import ConfigurationError
from expiryscan.extraction import DateExtractor, YearWindow


class TestStatusThresholds:
    """Tests for StatusThresholds model."""

    def test_defaults(self):
        """Default bands: danger up to 4 days, soon up to 14."""
        thresholds = StatusThresholds()
        assert thresholds.danger_days == 4
        assert thresholds.soon_days == 14

    def test_custom_thresholds(self):
        """Custom thresholds should be accepted."""
        thresholds = StatusThresholds(danger_days=7, soon_days=30)
        assert thresholds.danger_days == 7
        assert thresholds.soon_days == 30

    def test_danger_must_be_below_soon(self):
        """Danger band must sit inside the soon band."""
        with pytest.raises(ValidationError):
            StatusThresholds(danger_days=14, soon_days=14)
        with pytest.raises(ValidationError):
            StatusThresholds(danger_days=20, soon_days=14)

    def test_bounds(self):
        """Thresholds cannot be negative."""
        with pytest.raises(ValidationError):
            StatusThresholds(danger_days=-1)
        with pytest.raises(ValidationError):
            StatusThresholds(soon_days=0)


class TestSettings:
    """Tests for Settings."""

    def test_default_settings(self):
        """Defaults should give a deterministic extractor."""
        settings = Settings(_env_file=None)
        assert settings.log_level == "INFO"
        assert settings.log_format == "json"
        assert settings.locales == ["en", "id"]
        assert settings.year_policy == "absolute"
        assert settings.min_year == 1900
        assert settings.max_year == 2050
        assert settings.compact_yymmdd_fallback is False
        assert settings.confirmation_frames == 3
        assert settings.frame_interval == 10

    def test_invalid_year_policy(self):
        """Only absolute and forward are accepted."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, year_policy="backward")

    def test_empty_year_window(self):
        """min_year above max_year should be rejected."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, min_year=2030, max_year=2020)

    def test_empty_locales(self):
        """At least one locale is required."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, locales=[])

    def test_frame_settings_bounds(self):
        """Frame interval and confirmation count must be positive."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, frame_interval=0)
        with pytest.raises(ValidationError):
            Settings(_env_file=None, confirmation_frames=0)

    def test_env_prefix(self):
        """Settings should read from EXPIRYSCAN_ prefixed env vars."""
        with patch.dict(os.environ, {"EXPIRYSCAN_YEAR_POLICY": "forward"}):
            settings = Settings(_env_file=None)
            assert settings.year_policy == "forward"

    def test_env_locales(self):
        """Locales are read as a JSON list."""
        with patch.dict(os.environ, {"EXPIRYSCAN_LOCALES": '["en"]'}):
            settings = Settings(_env_file=None)
            assert settings.locales == ["en"]

    def test_env_nested_thresholds(self):
        """Nested thresholds use the __ delimiter."""
        with patch.dict(os.environ, {"EXPIRYSCAN_STATUS_THRESHOLDS__SOON_DAYS": "30"}):
            settings = Settings(_env_file=None)
            assert settings.status_thresholds.soon_days == 30
            assert settings.status_thresholds.danger_days == 4


class TestYearWindowFromSettings:
    """Tests for building the year window from settings."""

    def test_absolute(self):
        """Absolute policy uses min_year and max_year."""
        window = YearWindow.from_settings(Settings(_env_file=None, min_year=2000, max_year=2040))
        assert window == YearWindow(min_year=2000, max_year=2040)

    def test_forward_with_reference_year(self):
        """Forward policy spans reference_year to reference_year + forward_window_years."""
        settings = Settings(
            _env_file=None,
            year_policy="forward",
            reference_year=2026,
            forward_window_years=10,
        )
        assert YearWindow.from_settings(settings) == YearWindow(min_year=2026, max_year=2036)

    def test_forward_past_year_9999(self):
        """A window reaching past 9999 is a configuration error."""
        settings = Settings(
            _env_file=None,
            year_policy="forward",
            reference_year=9990,
            forward_window_years=20,
        )
        with pytest.raises(ConfigurationError):
            YearWindow.from_settings(settings)


class TestExtractorFromSettings:
    """Tests for DateExtractor.from_settings."""

    def test_from_settings(self):
        """Locales, window and fallback all come from settings."""
        settings = Settings(
            _env_file=None,
            locales=["en"],
            year_policy="forward",
            reference_year=2026,
            compact_yymmdd_fallback=True,
        )
        extractor = DateExtractor.from_settings(settings)

        assert [pack.code for pack in extractor.packs] == ["en"]
        assert extractor.window == YearWindow(min_year=2026, max_year=2046)
        match = extractor.extract(["320415"])
        assert match is not None
        assert match.date.isoformat() == "2032-04-15"

    def test_unknown_locale(self):
        """An unregistered locale code fails at construction."""
        settings = Settings(_env_file=None, locales=["xx"])
        with pytest.raises(ConfigurationError):
            DateExtractor.from_settings(settings)
