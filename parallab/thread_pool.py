"""A fixed-size pool of worker threads returning futures."""

from __future__ import annotations

import threading
from collections import deque
from concurrent.futures import Future
from typing import Any, Callable


class ThreadPool:
    """Runs submitted callables on a fixed number of worker threads.

    On shutdown the workers finish the task they are running; tasks still
    waiting in the queue are dropped and their futures cancelled.
    """

    def __init__(self, threads: int) -> None:
        if threads <= 0:
            raise ValueError("Thread count must be positive")
        self._tasks: deque[tuple[Future, Callable[[], Any]]] = deque()
        self._cond = threading.Condition()
        self._stop = False
        self._pending = 0
        self._workers = [
            threading.Thread(target=self._worker_loop, daemon=True) for _ in range(threads)
        ]
        for worker in self._workers:
            worker.start()

    def enqueue(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        """Schedule ``func(*args, **kwargs)`` and return a future for its result."""
        future: Future = Future()
        with self._cond:
            if self._stop:
                raise RuntimeError("ThreadPool has been shut down")
            self._tasks.append((future, lambda: func(*args, **kwargs)))
            self._pending += 1
            self._cond.notify()
        return future

    def tasks_pending(self) -> int:
        """Number of tasks queued or still running."""
        with self._cond:
            return self._pending

    def shutdown(self) -> None:
        """Stop the workers, wait for them, and cancel tasks never started."""
        with self._cond:
            if self._stop:
                return
            self._stop = True
            self._cond.notify_all()
        for worker in self._workers:
            worker.join()
        with self._cond:
            while self._tasks:
                future, _ = self._tasks.popleft()
                future.cancel()
                self._pending -= 1

    def __enter__(self) -> "ThreadPool":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()

    def _worker_loop(self) -> None:
        while True:
            with self._cond:
                while not self._tasks and not self._stop:
                    self._cond.wait()
                if self._stop:
                    return
                future, call = self._tasks.popleft()
            if future.set_running_or_notify_cancel():
                try:
                    result = call()
                except BaseException as exc:  # noqa: BLE001
                    future.set_exception(exc)
                else:
                    future.set_result(result)
            with self._cond:
                self._pending -= 1