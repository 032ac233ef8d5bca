"""Exception hierarchy for gopen."""

from typing import Any


class GopenError(Exception):
    """Base exception for all gopen errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class PathNotFoundError(GopenError):
    """The target path does not exist."""


class GitError(GopenError):
    """Base exception for git inspection failures."""


class NotAGitRepositoryError(GitError):
    """The target path is not inside a Git working tree."""


class GitCommandError(GitError):
    """A git subprocess failed or git is not installed."""


class OutputError(GopenError):
    """Base exception for output sink failures."""


class BrowserError(OutputError):
    """No web browser could be launched."""


class ClipboardError(OutputError):
    """The URL could not be written to the system clipboard."""
