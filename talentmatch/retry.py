"""Retry with exponential backoff and a classified error taxonomy."""
from __future__ import annotations

import asyncio
import enum
from typing import Any, Awaitable, Callable, TypeVar

from talentmatch.log import get_logger

log = get_logger(__name__)

T = TypeVar("T")

Sleep = Callable[[float], Awaitable[Any]]


class ErrorType(str, enum.Enum):
    NETWORK_ERROR = "NETWORK_ERROR"
    RATE_LIMIT = "RATE_LIMIT"
    PARSING_ERROR = "PARSING_ERROR"
    UNKNOWN = "UNKNOWN"

    @property
    def retryable(self) -> bool:
        # Parsing failures are permanent.
        return self is not ErrorType.PARSING_ERROR


class ScrapeError(Exception):
    """A fetch failure carrying its classification."""

    def __init__(self, message: str, error_type: ErrorType = ErrorType.UNKNOWN) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = ErrorType(error_type)

    @property
    def is_fatal(self) -> bool:
        return not self.error_type.retryable

    def __repr__(self) -> str:
        return f"ScrapeError({self.message!r}, {self.error_type.value})"


def classify(exc: BaseException) -> ErrorType:
    if isinstance(exc, ScrapeError):
        return exc.error_type
    return ErrorType.UNKNOWN


def backoff_delays(max_retries: int = 3, base_delay_ms: float = 800) -> list[float]:
    """Waits in ms after each failed attempt that is followed by another one."""
    return [base_delay_ms * (2 ** (attempt - 1)) for attempt in range(1, max_retries)]


async def fetch_with_retry(
    operation: Callable[[], Awaitable[T]],
    max_retries: int = 3,
    base_delay_ms: float = 800,
    *,
    sleep: Sleep = asyncio.sleep,
    name: str | None = None,
) -> T:
    """Await ``operation`` up to ``max_retries`` times.

    PARSING_ERROR failures are raised on the spot. Every other failure is
    retried after ``base_delay_ms * 2**(attempt-1)`` ms until the last
    attempt, whose error is re-raised unchanged.
    """
    if max_retries < 1:
        raise ValueError("max_retries must be >= 1")
    label = name or getattr(operation, "__qualname__", repr(operation))
    last_exc: BaseException | None = None

    for attempt in range(1, max_retries + 1):
        try:
            return await operation()
        except Exception as exc:
            last_exc = exc
            error_type = classify(exc)
            if not error_type.retryable:
                log.error("%s fatal %s: %s", label, error_type.value, exc)
                raise
            if attempt == max_retries:
                break
            delay_ms = base_delay_ms * (2 ** (attempt - 1))
            log.warning(
                "%s attempt %d/%d failed (%s: %s), retrying in %.0fms",
                label, attempt, max_retries, error_type.value, exc, delay_ms,
            )
            await sleep(delay_ms / 1000)

    log.error("%s failed after %d attempts: %s", label, max_retries, last_exc)
    raise last_exc  # type: ignore[misc]
