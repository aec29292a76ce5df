"""
Custom exceptions and error handling for Carriage.

Defines application-specific exceptions with error codes. Each code maps to
one HTTP status; the API layer translates every CarriageError into the
``{"err": <message>}`` envelope in a single exception handler.

Usage:
    from carriage.errors import NotFoundError, ErrorCode

    raise NotFoundError("Rider not found", code=ErrorCode.NOT_FOUND)
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Authentication errors
    AUTH_FAILED = "AUTH_FAILED"
    INVALID_TOKEN = "INVALID_TOKEN"

    # Authorization errors
    FORBIDDEN = "FORBIDDEN"
    INACTIVE_ACCOUNT = "INACTIVE_ACCOUNT"

    # Resource errors
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_REQUEST = "INVALID_REQUEST"

    # System errors
    STORAGE_ERROR = "STORAGE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.AUTH_FAILED: "Authentication failed. Please sign in again.",
    ErrorCode.INVALID_TOKEN: "Your session has expired. Please sign in again.",
    ErrorCode.FORBIDDEN: "You do not have permission to perform this action.",
    ErrorCode.INACTIVE_ACCOUNT: "This account is no longer active.",
    ErrorCode.NOT_FOUND: "The requested record does not exist.",
    ErrorCode.CONFLICT: "A record with this id already exists.",
    ErrorCode.VALIDATION_ERROR: "Your request contains invalid information. Please check and try again.",
    ErrorCode.INVALID_REQUEST: "Invalid request format. Please try again.",
    ErrorCode.STORAGE_ERROR: "The data store is temporarily unavailable. Please try again.",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred. Please try again.",
}

HTTP_STATUS: dict[ErrorCode, int] = {
    ErrorCode.AUTH_FAILED: 401,
    ErrorCode.INVALID_TOKEN: 401,
    ErrorCode.FORBIDDEN: 403,
    ErrorCode.INACTIVE_ACCOUNT: 403,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.CONFLICT: 409,
    ErrorCode.VALIDATION_ERROR: 422,
    ErrorCode.INVALID_REQUEST: 422,
    ErrorCode.STORAGE_ERROR: 500,
    ErrorCode.INTERNAL_ERROR: 500,
}


class CarriageError(Exception):
    """Base exception for all Carriage errors."""

    default_code = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, code: ErrorCode | None = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])

    @property
    def status_code(self) -> int:
        return HTTP_STATUS.get(self.code, 500)


class AuthenticationError(CarriageError):
    """Missing, malformed, expired or unknown credentials."""

    default_code = ErrorCode.AUTH_FAILED


class AuthorizationError(CarriageError):
    """Valid credentials without the privileges a route requires."""

    default_code = ErrorCode.FORBIDDEN


class NotFoundError(CarriageError):
    default_code = ErrorCode.NOT_FOUND


class ConflictError(CarriageError):
    default_code = ErrorCode.CONFLICT


class ValidationError(CarriageError):
    """Input validation failed."""

    default_code = ErrorCode.VALIDATION_ERROR


class StorageError(CarriageError):
    """The backing store rejected or failed an operation."""

    default_code = ErrorCode.STORAGE_ERROR
