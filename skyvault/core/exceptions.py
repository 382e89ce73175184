"""Application exception hierarchy.

Every exception here maps to an RFC 7807 problem-details response through the
handlers registered in ``skyvault.app.exception_handlers``.
"""

from __future__ import annotations

from typing import Any

_DEFAULT_TITLES = {
    400: "Bad Request",
    404: "Not Found",
    409: "Conflict",
    422: "Unprocessable Entity",
    500: "Internal Server Error",
}


class AppException(Exception):
    """Base application exception.

    Attributes:
        status_code: HTTP status code for the error.
        detail: Human-readable error message.
        type: Error type identifier (RFC 7807 ``type`` member).
        title: Short, human-readable summary of the problem type.
        instance: URI reference that identifies this occurrence.
        extra: Additional context-specific information about the error.

    Example:
        raise AppException(
            status_code=404,
            detail="Folder 3f2a... not found",
            type="folder-not-found",
            extra={"folder_id": "3f2a..."},
        )
    """

    def __init__(
        self,
        status_code: int,
        detail: str,
        type: str = "about:blank",
        title: str | None = None,
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        self.status_code = status_code
        self.detail = detail
        self.type = type
        self.title = title or _DEFAULT_TITLES.get(status_code, "Error")
        self.instance = instance
        self.extra = extra or {}
        super().__init__(detail)


class BadRequestException(AppException):
    """Raised for malformed client input that cannot be normalized."""

    def __init__(
        self,
        detail: str,
        type: str = "bad-request",
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=400,
            detail=detail,
            type=type,
            title="Bad Request",
            instance=instance,
            extra=extra,
        )


class InvalidCursorException(BadRequestException):
    """Raised when a pagination cursor cannot be decoded.

    Covers over-long strings, broken encodings, a field count that does not
    match the requested sort key, and unparseable timestamps. The client
    should restart the traversal without a cursor; retrying the same cursor
    will always fail.

    Example:
        raise InvalidCursorException("Invalid cursor: expected 2 fields, got 1")
    """

    def __init__(self, detail: str = "Invalid cursor", *, reason: str | None = None) -> None:
        super().__init__(
            detail=detail,
            type="invalid-cursor",
            extra={"reason": reason} if reason else None,
        )


class NotFoundException(AppException):
    """Raised when a requested resource does not exist for the caller.

    Example:
        raise NotFoundException(
            detail="Contact group 7c1e... not found",
            type="contact-group-not-found",
            extra={"group_id": "7c1e..."},
        )
    """

    def __init__(
        self,
        detail: str,
        type: str = "not-found",
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=404,
            detail=detail,
            type=type,
            title="Not Found",
            instance=instance,
            extra=extra,
        )


class ConflictException(AppException):
    """Raised when a write would violate a uniqueness rule."""

    def __init__(
        self,
        detail: str,
        type: str = "conflict",
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=409,
            detail=detail,
            type=type,
            title="Conflict",
            instance=instance,
            extra=extra,
        )
