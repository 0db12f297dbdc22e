"""A process-wide thread pool running asynchronous requests."""

from __future__ import annotations

import os
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from datetime import timedelta
from typing import Any, Callable, ClassVar, Optional, Union

from reqkit.async_wrapper import AsyncWrapper, CancellableAsyncWrapper

DEFAULT_MIN_THREADS = 1
DEFAULT_MAX_THREADS = max(1, os.cpu_count() or 1)
DEFAULT_MAX_IDLE = timedelta(seconds=60)


class GlobalThreadPool:
    """The shared worker pool; one instance per process.

    ``min_threads``, ``max_threads`` and ``max_idle`` take effect the next time
    the pool is started.
    """

    _instance: ClassVar[Optional["GlobalThreadPool"]] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(
        self,
        min_threads: int = DEFAULT_MIN_THREADS,
        max_threads: int = DEFAULT_MAX_THREADS,
        max_idle: timedelta = DEFAULT_MAX_IDLE,
    ) -> None:
        self.min_threads = min_threads
        self.max_threads = max_threads
        self.max_idle = max_idle
        self._executor: Optional[ThreadPoolExecutor] = None
        self._lock = threading.Lock()

    @classmethod
    def instance(cls) -> "GlobalThreadPool":
        """Return the process-wide pool, creating it on first use."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    @classmethod
    def _exit_instance(cls) -> None:
        with cls._instance_lock:
            pool, cls._instance = cls._instance, None
        if pool is not None:
            pool.shutdown()

    def _start_locked(self) -> ThreadPoolExecutor:
        if self._executor is None:
            workers = max(1, self.min_threads, self.max_threads)
            self._executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="reqkit-async")
        return self._executor

    def start(self) -> None:
        """Start the worker threads if they are not running yet."""
        with self._lock:
            self._start_locked()

    def is_started(self) -> bool:
        with self._lock:
            return self._executor is not None

    def submit(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        """Run ``fn`` on a worker, starting the pool if needed."""
        with self._lock:
            executor = self._start_locked()
            return executor.submit(fn, *args, **kwargs)

    def shutdown(self) -> None:
        """Wait for queued work and stop the workers."""
        with self._lock:
            executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=True)


def run_async(
    fn: Callable[..., Any],
    *args: Any,
    cancellable: bool = False,
    **kwargs: Any,
) -> Union[AsyncWrapper, CancellableAsyncWrapper]:
    """Run ``fn`` on the global pool and return a wrapper for its result."""
    future = GlobalThreadPool.instance().submit(fn, *args, **kwargs)
    if cancellable:
        return CancellableAsyncWrapper(future, threading.Event())
    return AsyncWrapper(future)


def startup(
    min_threads: int = DEFAULT_MIN_THREADS,
    max_threads: int = DEFAULT_MAX_THREADS,
    max_idle: timedelta = DEFAULT_MAX_IDLE,
) -> None:
    """Configure and start the global pool; does nothing if it already runs."""
    pool = GlobalThreadPool.instance()
    if pool.is_started():
        return
    pool.min_threads = min_threads
    pool.max_threads = max_threads
    pool.max_idle = max_idle
    pool.start()


def cleanup() -> None:
    """Stop the global pool and discard it."""
    GlobalThreadPool._exit_instance()