"""Error taxonomy shared by the validator, the store and the services."""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
    STORE = "store"


class StorefrontError(Exception):
    kind: ErrorKind = ErrorKind.STORE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(StorefrontError):
    """Input violates a business rule. ``field`` names the offending field."""

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class NotFoundError(StorefrontError):
    kind = ErrorKind.NOT_FOUND


class UnauthorizedError(StorefrontError):
    kind = ErrorKind.UNAUTHORIZED

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)


class StoreError(StorefrontError):
    """A persistence operation failed.

    ``code`` is one of ``unique_violation``, ``integrity_error``,
    ``not_found`` or ``store_error``. The message carries the driver detail
    and is meant for logs only.
    """

    kind = ErrorKind.STORE

    UNIQUE_VIOLATION = "unique_violation"
    INTEGRITY_ERROR = "integrity_error"
    NOT_FOUND = "not_found"
    STORE_ERROR = "store_error"

    def __init__(self, message: str, code: str = STORE_ERROR) -> None:
        super().__init__(message)
        self.code = code
