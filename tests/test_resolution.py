"""Tests for component resolution and calendar validation."""

import pytest

from expiryscan.extraction import (
    PIVOT_YEAR,
    YearWindow,
    is_valid_date,
    normalize_year,
    parse_month,
    resolve,
    split_compact,
)
from expiryscan.models import DateComponents, ResolvedDate


class TestNormalizeYear:
    """Tests for the fixed two-digit pivot."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [(0, 2000), (25, 2025), (49, 2049), (50, 1950), (72, 1972), (99, 1999)],
    )
    def test_two_digit(self, raw, expected):
        assert normalize_year(raw) == expected

    def test_four_digit_unchanged(self):
        assert normalize_year(2031) == 2031
        assert normalize_year(1899) == 1899

    def test_pivot_constant(self):
        assert PIVOT_YEAR == 50


class TestParseMonth:
    """Tests for month token parsing."""

    def test_numeric(self):
        assert parse_month("11") == 11
        assert parse_month("07") == 7

    def test_names(self):
        """English and Indonesian tokens resolve with the default table."""
        assert parse_month("NOV") == 11
        assert parse_month("sept") == 9
        assert parse_month("AGUSTUS") == 8
        assert parse_month("DES") == 12
        assert parse_month("OKT.") == 10

    def test_unknown(self):
        assert parse_month("FOO") is None
        assert parse_month("") is None

    def test_custom_table(self):
        """Only the given table is consulted for names."""
        assert parse_month("MAI", {"MAI": 5}) == 5
        assert parse_month("NOV", {"MAI": 5}) is None


class TestIsValidDate:
    """Tests for calendar validation."""

    def test_month_lengths(self):
        assert is_valid_date(31, 1, 2027)
        assert not is_valid_date(31, 4, 2027)
        assert is_valid_date(30, 4, 2027)

    def test_leap_rules(self):
        """Divisible by 4, except centuries not divisible by 400."""
        assert is_valid_date(29, 2, 2028)
        assert not is_valid_date(29, 2, 2025)
        assert is_valid_date(29, 2, 2000)
        assert not is_valid_date(29, 2, 1900)

    def test_out_of_range_components(self):
        assert not is_valid_date(0, 1, 2027)
        assert not is_valid_date(32, 1, 2027)
        assert not is_valid_date(1, 0, 2027)
        assert not is_valid_date(1, 13, 2027)

    def test_window(self):
        """The year must fall inside the window."""
        assert is_valid_date(1, 1, 1900)
        assert is_valid_date(1, 1, 2050)
        assert not is_valid_date(1, 1, 1899)
        assert not is_valid_date(1, 1, 2051)
        window = YearWindow.forward(reference_year=2026, span=5)
        assert not is_valid_date(1, 1, 2025, window)
        assert is_valid_date(1, 1, 2031, window)


class TestResolve:
    """Tests for resolve()."""

    def test_named_month(self):
        assert resolve("15", "NOV", "2027") == ResolvedDate(year=2027, month=11, day=15)

    def test_missing_day_defaults_to_first(self):
        assert resolve(None, "11", "27") == ResolvedDate(year=2027, month=11, day=1)

    def test_two_digit_year(self):
        assert resolve("15", "11", "72") == ResolvedDate(year=1972, month=11, day=15)

    def test_rejections_return_none(self):
        """Every invalid combination yields None rather than raising."""
        assert resolve("31", "04", "2027") is None
        assert resolve("1", "FOO", "2027") is None
        assert resolve("1", "13", "2027") is None
        assert resolve("29", "02", "2025") is None
        assert resolve("1", "01", "2051") is None

    def test_pivot_not_logged_here(self, caplog):
        """Only rejections are logged; pivot expansions are reported by the extractor."""
        import logging

        with caplog.at_level(logging.DEBUG, logger="expiryscan.extraction.resolution"):
            assert resolve("15", "11", "25") is not None
            assert resolve("32", "11", "25") is None

        messages = [r.getMessage() for r in caplog.records]
        assert len(messages) == 1
        assert messages[0].startswith("Rejected components")

    def test_custom_window(self):
        window = YearWindow.forward(reference_year=2026)
        assert resolve("15", "11", "25", window=window) is None
        assert resolve("15", "11", "27", window=window) is not None


class TestSplitCompact:
    """Tests for unseparated digit runs."""

    def test_four_digits_mmyy(self):
        assert split_compact("1127") == [DateComponents(month="11", year="27")]

    def test_six_digits_ddmmyy(self):
        assert split_compact("140625") == [DateComponents(day="14", month="06", year="25")]

    def test_six_digits_with_fallback(self):
        """YYMMDD is offered second."""
        assert split_compact("320415", yymmdd_fallback=True) == [
            DateComponents(day="32", month="04", year="15"),
            DateComponents(day="15", month="04", year="32"),
        ]

    def test_eight_digits(self):
        assert split_compact("15112027") == [DateComponents(day="15", month="11", year="2027")]

    @pytest.mark.parametrize("digits", ["", "123", "12345", "1234567", "123456789", "12AB"])
    def test_other_lengths(self, digits):
        assert split_compact(digits) == []


class TestYearWindow:
    """Tests for the YearWindow model."""

    def test_absolute_default(self):
        window = YearWindow.absolute()
        assert (window.min_year, window.max_year) == (1900, 2050)

    def test_forward_default_uses_current_year(self):
        from datetime import date

        window = YearWindow.forward()
        assert window.min_year == date.today().year
        assert window.max_year == window.min_year + 20

    def test_inverted_window_rejected(self):
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            YearWindow(min_year=2050, max_year=1900)

    def test_contains(self):
        window = YearWindow(min_year=2020, max_year=2030)
        assert window.contains(2020)
        assert window.contains(2030)
        assert not window.contains(2031)
