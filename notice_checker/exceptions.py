"""Custom exceptions for notice-checker."""


class NoticeCheckerError(Exception):
    """Base exception for all notice-checker errors."""

    pass


class ConfigurationError(NoticeCheckerError):
    """Exception raised when plugin options or the config file are invalid."""

    pass


class ManifestReadError(NoticeCheckerError):
    """Exception raised when a dependency manifest cannot be read or parsed."""

    pass
