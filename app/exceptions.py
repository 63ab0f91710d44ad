# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error response is a JSON object with a single "message" key.
# The machine-readable code stays server-side (logs only).
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class UdaaroException(Exception):
    """
    Base exception for the Udaaro API.

    All custom exceptions inherit from this class. The status code decides
    the HTTP response; `code` and `details` are for logs.
    """

    def __init__(
        self,
        message: str,
        code: str = "UDAARO_ERROR",
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        return {"message": self.message}


# =============================================================================
# Record Exceptions
# =============================================================================

class RecordValidationError(UdaaroException):
    """Raised when a create payload is missing name or email."""

    def __init__(self, collection: str, fields: list[str] | None = None):
        super().__init__(
            message="Name and Email required",
            code="VALIDATION_ERROR",
            status_code=400,
            details={"collection": collection, "fields": fields or []}
        )


class InvalidPayloadError(UdaaroException):
    """Raised when the request body isn't a JSON object."""

    def __init__(self, collection: str):
        super().__init__(
            message="Request body must be a JSON object",
            code="INVALID_PAYLOAD",
            status_code=400,
            details={"collection": collection}
        )


class InvalidCollectionError(UdaaroException):
    """Raised when the path names something other than founders/investors/mentors."""

    def __init__(self, collection: str):
        super().__init__(
            message="Invalid type",
            code="INVALID_COLLECTION",
            status_code=400,
            details={"collection": collection}
        )


# =============================================================================
# Auth Exceptions
# =============================================================================

class AccessDeniedError(UdaaroException):
    """Raised when a protected route is called without a bearer token."""

    def __init__(self):
        super().__init__(
            message="Access denied",
            code="ACCESS_DENIED",
            status_code=401,
        )


class InvalidTokenError(UdaaroException):
    """Raised when a bearer token fails signature or expiry checks."""

    def __init__(self, reason: str | None = None):
        super().__init__(
            message="Invalid or expired token",
            code="INVALID_TOKEN",
            status_code=401,
            details={"reason": reason} if reason else None
        )


class InvalidCredentialsError(UdaaroException):
    """Raised when login input doesn't match the admin credential."""

    def __init__(self):
        super().__init__(
            message="Invalid credentials",
            code="INVALID_CREDENTIALS",
            status_code=401,
        )


class AdminNotConfiguredError(UdaaroException):
    """Raised when no admin credential is available at all."""

    def __init__(self, source: str | None = None):
        super().__init__(
            message="Admin credentials not configured",
            code="ADMIN_NOT_CONFIGURED",
            status_code=500,
            details={"source": source} if source else None
        )


# =============================================================================
# Storage Exceptions
# =============================================================================

class StorageReadError(UdaaroException):
    """Raised when a collection can't be read and the caller needs its contents."""

    def __init__(self, collection: str, error: str):
        super().__init__(
            message="Failed to read records",
            code="STORAGE_READ_ERROR",
            status_code=500,
            details={"collection": collection, "error": error}
        )


class StorageWriteError(UdaaroException):
    """Raised when a collection change can't be persisted."""

    def __init__(self, collection: str, error: str):
        super().__init__(
            message="Failed to save records",
            code="STORAGE_WRITE_ERROR",
            status_code=500,
            details={"collection": collection, "error": error}
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def udaaro_exception_handler(
    request: Request,
    exc: UdaaroException
) -> JSONResponse:
    """
    Convert UdaaroException to JSON response.

    Server errors are logged with their details; client errors only at debug.
    """
    if exc.status_code >= 500:
        logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.details}")
    else:
        logger.debug(f"{exc.code} on {request.method} {request.url.path}")

    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle request validation errors raised by FastAPI (malformed bodies).
    """
    logger.debug(f"Request validation failed: {exc}")
    return JSONResponse(
        status_code=422,
        content={"message": "Validation error"}
    )
