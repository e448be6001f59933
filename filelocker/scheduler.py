"""Background execution of remote lock operations.

Work for one path runs in submission order; work for different paths runs
concurrently on a shared thread pool. Callers never wait on a unit; failures
are logged here.
"""

import logging
import threading
from collections import deque
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Deque, Dict

logger = logging.getLogger(__name__)


class PathSerialExecutor:
    """Fire-and-forget executor with per-path FIFO ordering."""

    def __init__(self, max_workers: int = 4):
        self._pool = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="filelocker")
        self._mutex = threading.Lock()
        self._idle = threading.Condition(self._mutex)
        self._queues: Dict[str, Deque[Callable[[], None]]] = {}
        self._pending = 0
        self._closed = False

    def submit(self, key: str, fn: Callable[[], None]) -> None:
        """Queue fn behind any earlier work for key."""
        with self._mutex:
            if self._closed:
                raise RuntimeError("executor has been shut down")
            self._pending += 1
            queue = self._queues.get(key)
            if queue is not None:
                queue.append(fn)
                return
            self._queues[key] = deque([fn])
        try:
            self._pool.submit(self._drain, key)
        except RuntimeError:
            # pool shut down after the check above
            with self._mutex:
                self._pending -= len(self._queues.pop(key))
                self._idle.notify_all()
            raise

    def _drain(self, key: str) -> None:
        while True:
            with self._mutex:
                queue = self._queues[key]
                fn = queue[0]
            try:
                fn()
            except Exception:
                logger.exception("Background work failed for %s", key)
            with self._mutex:
                queue.popleft()
                self._pending -= 1
                if not queue:
                    del self._queues[key]
                    self._idle.notify_all()
                    return

    def flush(self, timeout: float = None) -> bool:
        """Wait until all queued work is done. Returns False on timeout."""
        with self._mutex:
            return self._idle.wait_for(lambda: self._pending == 0, timeout=timeout)

    def shutdown(self, wait: bool = True) -> None:
        with self._mutex:
            self._closed = True
        self._pool.shutdown(wait=wait)
