"""Shared error helpers for HTTP APIs."""

from __future__ import annotations

from typing import Any, Optional

from fastapi import HTTPException, status

from finder_api.models.error import Error


def error_payload(message: str, *, details: Optional[Any] = None) -> dict[str, Any]:
    return Error(error=message, details=details).model_dump(by_alias=True, exclude_none=True)


def http_error(
    status_code: int,
    message: str,
    *,
    details: Optional[Any] = None,
) -> HTTPException:
    return HTTPException(status_code=status_code, detail=error_payload(message, details=details))


def bad_request(message: str, *, details: Optional[Any] = None) -> HTTPException:
    return http_error(status.HTTP_400_BAD_REQUEST, message, details=details)


def not_found(message: str, *, details: Optional[Any] = None) -> HTTPException:
    return http_error(status.HTTP_404_NOT_FOUND, message, details=details)


def conflict(message: str, *, details: Optional[Any] = None) -> HTTPException:
    return http_error(status.HTTP_409_CONFLICT, message, details=details)


def internal_error(message: str, *, details: Optional[Any] = None) -> HTTPException:
    return http_error(status.HTTP_500_INTERNAL_SERVER_ERROR, message, details=details)


__all__ = [
    "bad_request",
    "conflict",
    "error_payload",
    "http_error",
    "internal_error",
    "not_found",
]
