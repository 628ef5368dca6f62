"""Service results, mapped to HTTP responses once at the blueprint layer."""
from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

import structlog

from storefront.errors import ErrorKind, StorefrontError

T = TypeVar("T")

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    message: str
    # Store/driver detail; logged, never sent to clients
    detail: str | None = None
    field: str | None = None

    @property
    def ok(self) -> bool:
        return False

    @classmethod
    def from_exception(cls, exc: StorefrontError) -> "Err":
        if exc.kind is ErrorKind.STORE:
            return cls(ErrorKind.STORE, "Internal server error", detail=exc.message)
        return cls(exc.kind, exc.message, field=getattr(exc, "field", None))


Result = Union[Ok[T], Err]

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.STORE: 500,
}


def status_for(err: Err) -> int:
    return STATUS_BY_KIND.get(err.kind, 500)


def error_body(err: Err) -> dict[str, Any]:
    body: dict[str, Any] = {"error": err.kind.value, "message": err.message}
    if err.field:
        body["field"] = err.field
    return body


def returns_result(fn: Callable[..., T]) -> Callable[..., Result[T]]:
    """Turn a service function that raises StorefrontError into one returning a Result."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Result[T]:
        try:
            return Ok(fn(*args, **kwargs))
        except StorefrontError as e:
            err = Err.from_exception(e)
            if err.kind is ErrorKind.STORE:
                log.error("store_failure", operation=fn.__name__, code=getattr(e, "code", None), detail=err.detail)
            else:
                log.info("request_rejected", operation=fn.__name__, kind=err.kind.value, message=err.message)
            return err

    return wrapper
