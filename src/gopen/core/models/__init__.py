"""Domain models for gopen."""

from gopen.core.models.repository import LineSelector, RepositoryContext

__all__ = [
    "LineSelector",
    "RepositoryContext",
]
