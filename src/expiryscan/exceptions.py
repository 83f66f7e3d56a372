"""expiryscan exception hierarchy.

The extraction engine itself never raises for any text input: "no date
found" is a normal result. These exceptions cover misconfiguration only,
and are raised while building settings, locale packs, extractors,
throttles or trackers. All inherit from ExpiryScanError.
"""

from __future__ import annotations


class ExpiryScanError(Exception):
    """Base exception for all expiryscan errors.

    Attributes:
        message: Human-readable error description.
        code: Machine-readable error code.
    """

    code: str = "expiryscan_error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(ExpiryScanError):
    """A constructor argument is out of range, e.g. a frame interval of 0.

    Attributes:
        field: The argument that failed validation.
    """

    code: str = "validation_error"

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"{field}: {message}")


class ConfigurationError(ExpiryScanError):
    """Settings that cannot produce a working extractor."""

    code: str = "configuration_error"


class UnknownLocaleError(ConfigurationError):
    """Requested locale pack is not registered.

    Attributes:
        locale: The locale code that was requested.
    """

    code: str = "unknown_locale"

    def __init__(self, locale: str) -> None:
        self.locale = locale
        super().__init__(f"Unknown locale pack: {locale}")
