"""Tests for custom exceptions."""

import pytest

from notice_checker.exceptions import (
    ConfigurationError,
    ManifestReadError,
    NoticeCheckerError,
)


class TestExceptionHierarchy:
    """Tests for exception hierarchy."""

    def test_notice_checker_error_is_exception(self) -> None:
        """Test that NoticeCheckerError inherits from Exception."""
        assert issubclass(NoticeCheckerError, Exception)

    def test_configuration_error_inherits_from_base(self) -> None:
        """Test that ConfigurationError inherits from NoticeCheckerError."""
        assert issubclass(ConfigurationError, NoticeCheckerError)

    def test_manifest_read_error_inherits_from_base(self) -> None:
        """Test that ManifestReadError inherits from NoticeCheckerError."""
        assert issubclass(ManifestReadError, NoticeCheckerError)

    def test_configuration_error_can_be_raised(self) -> None:
        """Test that ConfigurationError can be raised with a message."""
        with pytest.raises(NoticeCheckerError, match="Invalid config file"):
            raise ConfigurationError("Invalid config file")

    def test_manifest_read_error_can_be_raised(self) -> None:
        """Test that ManifestReadError can be raised with a message."""
        with pytest.raises(NoticeCheckerError, match="Cannot read manifest"):
            raise ManifestReadError("Cannot read manifest")
