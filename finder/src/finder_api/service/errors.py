"""Errors raised by the finder services."""

from __future__ import annotations

from finder_api.models.group_ref import GroupRef


class FinderServiceError(Exception):
    """Base error for finder services."""


class UpstreamError(FinderServiceError):
    """Raised when a directory call the request cannot do without fails."""

    def __init__(self, message: str, details: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class DirectoryObjectNotFoundError(FinderServiceError):
    """Raised when a resolver finds no matching directory object."""


class AmbiguousGroupError(FinderServiceError):
    """Raised when several groups share the requested display name."""

    def __init__(self, display_name: str, candidates: list[GroupRef]) -> None:
        super().__init__(f"Multiple groups named '{display_name}' found")
        self.display_name = display_name
        self.candidates = candidates


__all__ = [
    "AmbiguousGroupError",
    "DirectoryObjectNotFoundError",
    "FinderServiceError",
    "UpstreamError",
]
