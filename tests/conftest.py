"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from expiryscan.extraction import DateExtractor, YearWindow
from expiryscan.logging import clear_context


@pytest.fixture
def extractor() -> DateExtractor:
    """Extractor with the default locales and the absolute 1900-2050 window."""
    return DateExtractor()


@pytest.fixture
def english_extractor() -> DateExtractor:
    """Extractor limited to the English locale pack."""
    return DateExtractor(locales=["en"])


@pytest.fixture
def forward_extractor() -> DateExtractor:
    """Extractor with a forward window starting in 2026, independent of the clock."""
    return DateExtractor(window=YearWindow.forward(reference_year=2026, span=20))


@pytest.fixture(autouse=True)
def _clean_log_context():
    """Keep bound logging context from leaking between tests."""
    clear_context()
    yield
    clear_context()
