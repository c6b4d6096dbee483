"""Custom exceptions for cthing-publishing."""


class PublishingError(Exception):
    """Base exception for cthing-publishing."""


class ScmUrlError(PublishingError):
    """Raised when a Git remote URL cannot be turned into a valid URI."""


class SnapshotNotFoundError(PublishingError):
    """Raised when a project snapshot file cannot be found."""


class SnapshotParseError(PublishingError):
    """Raised when a project snapshot file cannot be read or validated."""


class ConfigError(PublishingError, ValueError):
    """Raised when the environment configuration is missing or invalid."""
