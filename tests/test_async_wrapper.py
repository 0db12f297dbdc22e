import threading
from concurrent.futures import Future
from datetime import timedelta

import pytest

from reqkit.async_wrapper import (
    AsyncWrapper,
    CancellableAsyncWrapper,
    CancellationResult,
    FutureStatus,
)


def _done(value):
    future = Future()
    future.set_result(value)
    return future


def test_get_returns_result_once():
    wrapper = AsyncWrapper(_done("value"))
    assert wrapper.valid() is True
    assert wrapper.get() == "value"
    assert wrapper.valid() is False
    with pytest.raises(RuntimeError):
        wrapper.get()


def test_default_wrapper_is_invalid():
    wrapper = AsyncWrapper()
    assert wrapper.valid() is False
    with pytest.raises(RuntimeError):
        wrapper.wait()
    with pytest.raises(RuntimeError):
        wrapper.wait_for(0.01)


def test_wait_for_timeout_and_ready():
    future = Future()
    wrapper = AsyncWrapper(future)
    assert wrapper.wait_for(0.01) is FutureStatus.timeout
    future.set_result(1)
    assert wrapper.wait_for(timedelta(seconds=1)) is FutureStatus.ready


def test_get_propagates_exception():
    future = Future()
    future.set_exception(KeyError("missing"))
    wrapper = AsyncWrapper(future)
    with pytest.raises(KeyError):
        wrapper.get()


def test_cancel_then_invalid():
    state = threading.Event()
    wrapper = CancellableAsyncWrapper(Future(), state)
    assert wrapper.is_cancelled() is False
    assert wrapper.cancel() is CancellationResult.success
    assert state.is_set()
    assert wrapper.valid() is False
    assert wrapper.cancel() is CancellationResult.invalid_operation


def test_cancelled_operations_raise():
    wrapper = CancellableAsyncWrapper(_done(3), threading.Event())
    wrapper.cancel()
    with pytest.raises(RuntimeError):
        wrapper.get()
    with pytest.raises(RuntimeError):
        wrapper.wait()
    with pytest.raises(RuntimeError):
        wrapper.wait_for(0.01)


def test_cancel_without_future_is_invalid():
    wrapper = CancellableAsyncWrapper(None, threading.Event())
    assert wrapper.cancel() is CancellationResult.invalid_operation
    assert wrapper.is_cancelled() is False


def test_cancellable_get_when_not_cancelled():
    wrapper = CancellableAsyncWrapper(_done("ok"), threading.Event())
    assert wrapper.get() == "ok"
    assert wrapper.valid() is False