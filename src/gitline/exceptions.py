"""gitline exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class GitlineError(Exception):
    """Base exception for gitline errors."""


class NotARepositoryError(GitlineError):
    """Raised when no git metadata directory is found above a path."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        """Initialize with error message and the path discovery started from."""
        super().__init__(message)
        self.path: Path | None = path


class NoUpstreamConfiguredError(GitlineError):
    """Raised when the current branch has no remote-tracking branch.

    Always raised for detached and unborn HEADs, whatever the config says.
    """

    def __init__(self, message: str, *, branch: str | None = None) -> None:
        """Initialize with error message and the local branch name."""
        super().__init__(message)
        self.branch: str | None = branch


class MetadataReadError(GitlineError):
    """Raised when a metadata file or the index cannot be read."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        """Initialize with error message and the offending path."""
        super().__init__(message)
        self.path: Path | None = path


class InvalidEncodingError(GitlineError):
    """Raised when a resolved name is not valid UTF-8."""

    def __init__(self, message: str, *, value: bytes) -> None:
        """Initialize with error message and the raw undecodable value."""
        super().__init__(message)
        self.value: bytes = value


class ConfigError(GitlineError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when configuration cannot be loaded or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column
