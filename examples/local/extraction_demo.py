#!/usr/bin/env python3
"""Extraction cascade demonstration.

This example runs the strategy cascade over typical medicine-package
OCR output:
1. Keyword strategies - EXP / ED / BB / KADALUARSA followed by a date
2. Bare strategies - delimited, compact and month-name dates with no label
3. Rejections - impossible dates and batch numbers that only look like dates

Usage:
    python examples/local/extraction_demo.py
"""

from datetime import date

from expiryscan import DateExtractor, classify
from expiryscan.extraction import YearWindow


def demonstrate_frame(extractor: DateExtractor, label: str, texts: list[str]) -> None:
    """Run one frame's text through the extractor and show the result."""
    match = extractor.extract(texts)

    print(f"\n{'─' * 60}")
    print(f"📌 {label}")
    print(f"   Input: {texts}")
    if match is None:
        print("   (no date)")
        return
    report = classify(match.date, today=date.today())
    print(f"   ✓ {match.date}  via {match.strategy} ({match.tier.value})")
    print(f'     from "{match.text}", matched "{match.matched}"')
    if match.ambiguous_year:
        print(f"     two-digit year {match.components.year!r} expanded by pivot")
    print(f"     {report.days_remaining} days remaining -> {report.status.value}")


def main() -> None:
    """Run the extraction demo."""
    print("=" * 60)
    print("expiryscan Extraction Demo")
    print("=" * 60)

    extractor = DateExtractor()
    print(f"\nCascade ({len(extractor.cascade)} strategies):")
    for strategy in extractor.cascade:
        print(f"  • {strategy.tier.value:7} {strategy.name}")

    # =========================================================================
    # Keyword strategies
    # =========================================================================

    demonstrate_frame(
        extractor,
        "Keyword line wins over an earlier bare date",
        ["PARACETAMOL 500 MG", "05/12/2025", "EXP 15/11/2025"],
    )
    demonstrate_frame(extractor, "Month name after keyword", ["Exp. NOV 2027"])
    demonstrate_frame(extractor, "Compact after ED", ["LOT A1234", "ED 151127"])
    demonstrate_frame(
        extractor,
        "Indonesian label",
        ["KODE PRODUKSI A2403", "BAIK DIGUNAKAN SEBELUM 12 2027"],
    )

    # =========================================================================
    # Bare strategies
    # =========================================================================

    demonstrate_frame(extractor, "Two-digit year, below pivot", ["15-11-25"])
    demonstrate_frame(extractor, "Two-digit year, above pivot", ["15-11-72"])
    demonstrate_frame(extractor, "Compact MMYY", ["1127"])
    demonstrate_frame(extractor, "Compact DDMMYY", ["140625"])
    demonstrate_frame(extractor, "Indonesian month", ["15 AGUSTUS 2027"])
    demonstrate_frame(extractor, "Date glued to a batch number", ["123456715.11.2027"])

    # =========================================================================
    # Rejections
    # =========================================================================

    demonstrate_frame(extractor, "Impossible date", ["32/13/2025"])
    demonstrate_frame(extractor, "Feb 29 in a common year", ["29/02/2025"])

    # =========================================================================
    # Forward-looking window
    # =========================================================================

    print(f"\n{'=' * 60}")
    print("Forward year window")
    print("=" * 60)

    forward = DateExtractor(window=YearWindow.forward())
    print(f"\nWindow: {forward.window.min_year}-{forward.window.max_year}")
    demonstrate_frame(forward, "1972 is outside the window", ["15-11-72"])

    print(f"\n{'=' * 60}")
    print("Demo complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
