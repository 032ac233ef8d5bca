"""Core domain models and exceptions for gopen."""

from gopen.core.exceptions import (
    BrowserError,
    ClipboardError,
    GitCommandError,
    GitError,
    GopenError,
    NotAGitRepositoryError,
    OutputError,
    PathNotFoundError,
)
from gopen.core.models import LineSelector, RepositoryContext

__all__ = [
    # Models
    "RepositoryContext",
    "LineSelector",
    # Exceptions
    "GopenError",
    "PathNotFoundError",
    "GitError",
    "NotAGitRepositoryError",
    "GitCommandError",
    "OutputError",
    "BrowserError",
    "ClipboardError",
]
