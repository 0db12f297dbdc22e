"""Wrappers around futures of asynchronous requests, with optional cancellation."""

from __future__ import annotations

import threading
from concurrent.futures import Future
from concurrent.futures import wait as _wait_futures
from datetime import timedelta
from enum import Enum
from typing import Any, Generic, Optional, TypeVar, Union

T = TypeVar("T")

Timeout = Union[float, int, timedelta]


class CancellationResult(Enum):
    """Outcome of a cancellation attempt."""

    failure = 0
    success = 1
    invalid_operation = 2


class FutureStatus(Enum):
    """Result of waiting on a future with a time limit."""

    ready = "ready"
    timeout = "timeout"


def _seconds(timeout: Timeout) -> float:
    if isinstance(timeout, timedelta):
        return timeout.total_seconds()
    return float(timeout)


class AsyncWrapper(Generic[T]):
    """Holds the future of an asynchronous operation.

    Like a one-shot future, the result can be fetched once; afterwards the
    wrapper is no longer valid.
    """

    def __init__(self, future: Optional["Future[T]"] = None) -> None:
        self._future = future

    def _require_valid(self, message: str) -> "Future[T]":
        if self._future is None:
            raise RuntimeError(message)
        return self._future

    def get(self) -> T:
        """Wait for and return the result; the wrapper becomes invalid."""
        future = self._require_valid("Calling AsyncWrapper.get when the associated future instance is invalid!")
        self._future = None
        return future.result()

    def valid(self) -> bool:
        """True while a result can still be fetched."""
        return self._future is not None

    def wait(self) -> None:
        """Block until the operation is complete."""
        future = self._require_valid("Calling AsyncWrapper.wait when the associated future is invalid!")
        _wait_futures([future])

    def wait_for(self, timeout: Timeout) -> FutureStatus:
        """Block for at most ``timeout`` (seconds or a timedelta)."""
        future = self._require_valid("Calling AsyncWrapper.wait_for when the associated future is invalid!")
        done, _ = _wait_futures([future], timeout=max(0.0, _seconds(timeout)))
        return FutureStatus.ready if done else FutureStatus.timeout


class CancellableAsyncWrapper(AsyncWrapper[T]):
    """An async wrapper whose request can be cancelled.

    The cancellation flag is shared with the running request. Dropping the
    wrapper cancels the request as well.
    """

    def __init__(self, future: Optional["Future[T]"], cancelled: threading.Event) -> None:
        super().__init__(future)
        self._cancelled = cancelled

    def _require_not_cancelled(self, message: str) -> None:
        if self._cancelled.is_set():
            raise RuntimeError(message)

    def get(self) -> T:
        self._require_not_cancelled("Calling AsyncWrapper.get on a cancelled request!")
        return super().get()

    def valid(self) -> bool:
        return not self._cancelled.is_set() and super().valid()

    def wait(self) -> None:
        self._require_not_cancelled("Calling AsyncWrapper.wait when the associated future is invalid or cancelled!")
        super().wait()

    def wait_for(self, timeout: Timeout) -> FutureStatus:
        self._require_not_cancelled("Calling AsyncWrapper.wait_for when the associated future is cancelled!")
        return super().wait_for(timeout)

    def cancel(self) -> CancellationResult:
        """Mark the request as cancelled."""
        if self._future is None or self._cancelled.is_set():
            return CancellationResult.invalid_operation
        self._cancelled.set()
        return CancellationResult.success

    def is_cancelled(self) -> bool:
        """True once the request has been cancelled."""
        return self._cancelled.is_set()

    def __del__(self) -> None:
        cancelled: Any = getattr(self, "_cancelled", None)
        if cancelled is not None:
            cancelled.set()