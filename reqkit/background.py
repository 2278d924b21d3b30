"""A process-wide thread pool and helpers to run callables on it."""

from __future__ import annotations

import threading
from collections.abc import Callable
from concurrent.futures import Future
from datetime import timedelta
from typing import Any, TypeVar

from reqkit.threadpool import (
    DEFAULT_MAX_IDLE,
    DEFAULT_MAX_THREADS,
    DEFAULT_MIN_THREADS,
    ThreadPool,
)

_T = TypeVar("_T")


class GlobalThreadPool(ThreadPool):
    """The single shared pool used by :func:`run_async`."""

    _instance: GlobalThreadPool | None = None
    _lock = threading.Lock()

    @staticmethod
    def get_instance() -> GlobalThreadPool:
        """Return the shared pool, creating it on first use."""
        with GlobalThreadPool._lock:
            if GlobalThreadPool._instance is None:
                GlobalThreadPool._instance = GlobalThreadPool()
            return GlobalThreadPool._instance

    @staticmethod
    def exit_instance() -> None:
        """Stop and discard the shared pool, if there is one."""
        with GlobalThreadPool._lock:
            instance = GlobalThreadPool._instance
            GlobalThreadPool._instance = None
        if instance is not None and instance.is_started():
            instance.stop()

    def __copy__(self) -> GlobalThreadPool:
        raise TypeError("the global thread pool cannot be copied")

    def __deepcopy__(self, memo: dict[int, Any]) -> GlobalThreadPool:
        raise TypeError("the global thread pool cannot be copied")


def run_async(fn: Callable[..., _T], *args: Any, **kwargs: Any) -> Future[_T]:
    """Run ``fn(*args, **kwargs)`` on the shared pool and return its future."""
    return GlobalThreadPool.get_instance().submit(fn, *args, **kwargs)


def startup(
    min_threads: int = DEFAULT_MIN_THREADS,
    max_threads: int = DEFAULT_MAX_THREADS,
    max_idle_ms: int | timedelta = DEFAULT_MAX_IDLE,
) -> None:
    """Configure and start the shared pool; does nothing if it already runs."""
    pool = GlobalThreadPool.get_instance()
    if pool.is_started():
        return
    pool.min_thread_num = min_threads
    pool.max_thread_num = max_threads
    pool.max_idle_time = max_idle_ms
    pool.start()


def cleanup() -> None:
    """Stop and discard the shared pool."""
    GlobalThreadPool.exit_instance()