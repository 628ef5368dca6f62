"""Database connection retry utilities."""

import functools
import time
from typing import Any, Callable, TypeVar

import structlog
from psycopg2 import OperationalError as Psycopg2OperationalError
from sqlalchemy.exc import DisconnectionError, OperationalError

F = TypeVar('F', bound=Callable[..., Any])

log = structlog.get_logger(__name__)

# Only these failures are worth another attempt; everything else propagates
RETRYABLE_MESSAGES = (
    'ssl syscall error',
    'eof detected',
    'connection closed',
    'server closed the connection',
    'connection reset',
    'connection timed out',
    'could not connect',
    'ssl error: decryption failed',
    'bad record mac',
)


def is_retryable(exc: BaseException) -> bool:
    message = str(exc).lower()
    return any(keyword in message for keyword in RETRYABLE_MESSAGES)


def retry_db_operation(max_retries: int = 3, delay: float = 0.5, backoff: float = 2.0):
    """
    Decorator to retry database reads on dropped connections.

    Args:
        max_retries: Maximum number of retry attempts
        delay: Initial delay between retries in seconds
        backoff: Multiplier for delay after each retry
    """
    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            current_delay = delay
            for attempt in range(max_retries + 1):
                try:
                    return func(*args, **kwargs)
                except (OperationalError, DisconnectionError, Psycopg2OperationalError) as e:
                    if attempt >= max_retries or not is_retryable(e):
                        raise
                    log.warning(
                        "db_connection_retry",
                        operation=func.__name__,
                        attempt=attempt + 1,
                        max_attempts=max_retries + 1,
                        delay=current_delay,
                        error=str(e),
                    )
                    time.sleep(current_delay)
                    current_delay *= backoff

        return wrapper  # type: ignore[return-value]
    return decorator


def safe_db_operation(func: F, *args, **kwargs) -> Any:
    """
    Execute a database operation with retry logic.
    Use this for one-off operations that need retry protection.
    """
    @retry_db_operation()
    def _operation():
        return func(*args, **kwargs)

    return _operation()
