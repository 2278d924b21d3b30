"""A resizable worker thread pool that runs submitted callables."""

from __future__ import annotations

import os
import threading
from collections import deque
from collections.abc import Callable
from concurrent.futures import Future
from datetime import timedelta
from enum import Enum
from typing import Any, TypeVar

DEFAULT_MIN_THREADS = 1
DEFAULT_MAX_THREADS = os.cpu_count() or 1
DEFAULT_MAX_IDLE = timedelta(milliseconds=60000)

_T = TypeVar("_T")


class _Status(Enum):
    STOP = "stop"
    RUNNING = "running"
    PAUSE = "pause"


def _as_timedelta(value: int | timedelta) -> timedelta:
    if isinstance(value, timedelta):
        return value
    return timedelta(milliseconds=int(value))


class ThreadPool:
    """Runs tasks on between ``min_thread_num`` and ``max_thread_num`` threads.

    Threads above the minimum retire after staying idle for ``max_idle_time``.
    Submitting to a stopped pool starts it.
    """

    def __init__(
        self,
        min_threads: int = DEFAULT_MIN_THREADS,
        max_threads: int = DEFAULT_MAX_THREADS,
        max_idle_ms: int | timedelta = DEFAULT_MAX_IDLE,
    ) -> None:
        self.min_thread_num = min_threads
        self.max_thread_num = max_threads
        self._max_idle = _as_timedelta(max_idle_ms)
        self._status = _Status.STOP
        self._current = 0
        self._idle = 0
        self._tasks: deque[Callable[[], None]] = deque()
        self._threads: list[threading.Thread] = []
        self._cond = threading.Condition()

    @property
    def max_idle_time(self) -> timedelta:
        """How long a surplus thread may stay idle before it retires."""
        return self._max_idle

    @max_idle_time.setter
    def max_idle_time(self, value: int | timedelta) -> None:
        self._max_idle = _as_timedelta(value)

    @property
    def thread_count(self) -> int:
        """Number of live worker threads."""
        with self._cond:
            return self._current

    @property
    def idle_thread_count(self) -> int:
        """Number of worker threads not running a task."""
        with self._cond:
            return self._idle

    def is_started(self) -> bool:
        """Whether the pool is running or paused."""
        with self._cond:
            return self._status is not _Status.STOP

    def start(self, start_threads: int = 0) -> None:
        """Start the pool with ``start_threads`` threads, clamped to the limits."""
        with self._cond:
            if self._status is not _Status.STOP:
                raise RuntimeError("thread pool is already started")
            self._start_locked(start_threads)

    def stop(self) -> None:
        """Stop the pool and join its threads; queued tasks stay queued."""
        with self._cond:
            if self._status is _Status.STOP:
                raise RuntimeError("thread pool is not started")
            self._status = _Status.STOP
            self._cond.notify_all()
            threads = list(self._threads)
        current = threading.current_thread()
        for thread in threads:
            if thread is not current:
                thread.join()
        with self._cond:
            self._threads.clear()
            self._current = 0
            self._idle = 0
            self._cond.notify_all()

    def pause(self) -> None:
        """Stop handing out new tasks until resumed."""
        with self._cond:
            if self._status is _Status.RUNNING:
                self._status = _Status.PAUSE
                self._cond.notify_all()

    def resume(self) -> None:
        """Resume handing out tasks after a pause."""
        with self._cond:
            if self._status is _Status.PAUSE:
                self._status = _Status.RUNNING
                self._cond.notify_all()

    def wait(self) -> None:
        """Block until the queue is empty and every thread is idle, or the pool stops."""
        with self._cond:
            self._cond.wait_for(
                lambda: self._status is _Status.STOP or (not self._tasks and self._idle == self._current)
            )

    def submit(self, fn: Callable[..., _T], *args: Any, **kwargs: Any) -> Future[_T]:
        """Queue ``fn(*args, **kwargs)`` and return a future for its result."""
        future: Future[_T] = Future()

        def run() -> None:
            if not future.set_running_or_notify_cancel():
                return
            try:
                result = fn(*args, **kwargs)
            except BaseException as exc:
                future.set_exception(exc)
            else:
                future.set_result(result)

        with self._cond:
            if self._status is _Status.STOP:
                self._start_locked(0)
            if self._idle <= 0 and self._current < self.max_thread_num:
                self._create_thread()
            self._tasks.append(run)
            self._cond.notify_all()
        return future

    def __enter__(self) -> ThreadPool:
        if not self.is_started():
            self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self.is_started():
            self.stop()

    def _start_locked(self, start_threads: int) -> None:
        self._status = _Status.RUNNING
        count = max(start_threads, self.min_thread_num)
        count = min(count, self.max_thread_num)
        for _ in range(count):
            self._create_thread()

    def _create_thread(self) -> bool:
        if self._current >= self.max_thread_num:
            return False
        thread = threading.Thread(target=self._work, name="reqkit-worker", daemon=True)
        self._current += 1
        self._idle += 1
        self._threads.append(thread)
        thread.start()
        return True

    def _ready(self) -> bool:
        return self._status is _Status.STOP or (self._status is _Status.RUNNING and bool(self._tasks))

    def _work(self) -> None:
        me = threading.current_thread()
        while True:
            with self._cond:
                self._cond.wait_for(self._ready, timeout=self._max_idle.total_seconds())
                if self._status is _Status.STOP:
                    return
                if self._status is _Status.PAUSE:
                    continue
                if not self._tasks:
                    if self._current > self.min_thread_num:
                        self._retire(me)
                        return
                    continue
                self._idle -= 1
                task = self._tasks.popleft()
            task()
            with self._cond:
                self._idle += 1
                self._cond.notify_all()

    def _retire(self, thread: threading.Thread) -> None:
        self._current -= 1
        self._idle -= 1
        self._threads = [t for t in self._threads if t is not thread]
        self._cond.notify_all()

    def __repr__(self) -> str:
        return (
            f"ThreadPool(min={self.min_thread_num}, max={self.max_thread_num}, "
            f"status={self._status.value}, threads={self._current})"
        )