"""expiryscan: expiration dates from medicine-package OCR text.

Takes the short, noisy text fragments an OCR engine recognized in one
camera frame and decides whether any of them encodes an expiration date,
which one is most likely correct, and which calendar date it means.
English and Indonesian labels are supported out of the box.

Quick Start:
    from expiryscan import DateExtractor, classify

    extractor = DateExtractor()
    match = extractor.extract(["PARACETAMOL 500 MG", "EXP 15/11/2027"])
    if match is not None:
        report = classify(match.date)
        print(match.date, report.status, report.days_remaining)

Components:
    - DateExtractor: Prioritized, ordered strategy cascade (pure, stateless)
    - classify: Days remaining and safe/soon/danger/expired status
    - DetectionTracker / FrameThrottle: Multi-frame confirmation for live feeds
"""

__version__ = "0.1.0"

# Configuration
from .config import Settings, StatusThresholds, settings

# Exceptions
from .exceptions import (
    ConfigurationError,
    ExpiryScanError,
    UnknownLocaleError,
    ValidationError,
)

# Extraction
from .extraction import (
    DateExtractor,
    LocalePack,
    YearWindow,
    default_extractor,
    extract_expiration_date,
    prioritize,
    register_locale_pack,
    resolve,
    try_parse,
)

# Logging
from .logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    logger,
)

# Models
from .models import (
    DateComponents,
    ExpirationMatch,
    ExpiryStatus,
    ResolvedDate,
    StatusReport,
    StrategyTier,
)

# Status and tracking
from .status import classify, days_remaining
from .tracking import DetectionState, DetectionTracker, FrameThrottle, Guidance, guidance_for

__all__ = [
    # Version
    "__version__",
    # Configuration
    "Settings",
    "StatusThresholds",
    "settings",
    # Exceptions
    "ExpiryScanError",
    "ValidationError",
    "ConfigurationError",
    "UnknownLocaleError",
    # Extraction
    "DateExtractor",
    "LocalePack",
    "YearWindow",
    "default_extractor",
    "extract_expiration_date",
    "prioritize",
    "register_locale_pack",
    "resolve",
    "try_parse",
    # Logging
    "configure_logging",
    "get_logger",
    "logger",
    "bind_context",
    "clear_context",
    # Models
    "DateComponents",
    "ExpirationMatch",
    "ExpiryStatus",
    "ResolvedDate",
    "StatusReport",
    "StrategyTier",
    # Status and tracking
    "classify",
    "days_remaining",
    "DetectionState",
    "DetectionTracker",
    "FrameThrottle",
    "Guidance",
    "guidance_for",
]
