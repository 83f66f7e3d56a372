"""Tests for expiryscan exception hierarchy."""

import pytest

from expiryscan.exceptions import (
    ConfigurationError,
    ExpiryScanError,
    UnknownLocaleError,
    ValidationError,
)


class TestExpiryScanError:
    """Tests for the base ExpiryScanError class."""

    def test_error_message(self):
        """Should store and return message."""
        error = ExpiryScanError("Something went wrong")
        assert error.message == "Something went wrong"
        assert str(error) == "Something went wrong"

    def test_error_codes(self):
        """Each class carries its own machine-readable code."""
        assert ExpiryScanError("test").code == "expiryscan_error"
        assert ValidationError("interval", "bad").code == "validation_error"
        assert ConfigurationError("bad").code == "configuration_error"
        assert UnknownLocaleError("fr").code == "unknown_locale"

    def test_no_api_envelope(self):
        """Errors are plain exceptions without a serialization helper."""
        assert not hasattr(ExpiryScanError("test"), "to_dict")

    def test_inheritance(self):
        """All custom exceptions should inherit from ExpiryScanError."""
        exceptions = [
            ValidationError("interval", "must be at least 1"),
            ConfigurationError("bad window"),
            UnknownLocaleError("xx"),
        ]
        for exc in exceptions:
            assert isinstance(exc, ExpiryScanError)


class TestValidationError:
    """Tests for ValidationError."""

    def test_message_includes_field(self):
        """Should prefix the message with the field name."""
        error = ValidationError("required", "must be at least 1")
        assert error.field == "required"
        assert error.message == "required: must be at least 1"


class TestUnknownLocaleError:
    """Tests for UnknownLocaleError."""

    def test_is_configuration_error(self):
        """Should be catchable as a ConfigurationError."""
        with pytest.raises(ConfigurationError):
            raise UnknownLocaleError("fr")

    def test_carries_locale(self):
        """Should keep the requested code for the caller."""
        error = UnknownLocaleError("fr")
        assert error.locale == "fr"
        assert error.message == "Unknown locale pack: fr"
