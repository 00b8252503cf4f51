"""
Per-line mutation locks.

Section-list mutations are not safe to run concurrently on the same
line. Use cases that load, mutate and save a line hold that line's
lock for the whole round trip. Operations that touch every line at
once (deleting a station, creating a line) hold the whole catalog,
which waits for all line holders to finish and keeps new ones out.
"""

import threading
from contextlib import contextmanager
from typing import Iterator


class LineLocks:
    """Registry of one ``threading.Lock`` per line ID plus a catalog-wide hold."""

    def __init__(self) -> None:
        self._locks: dict[int, threading.Lock] = {}
        self._registry_lock = threading.Lock()
        self._condition = threading.Condition()
        self._line_holders = 0
        self._catalog_held = False

    def _lock_for(self, line_id: int) -> threading.Lock:
        with self._registry_lock:
            lock = self._locks.get(line_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[line_id] = lock
            return lock

    @contextmanager
    def hold(self, line_id: int) -> Iterator[None]:
        """Hold the lock of ``line_id`` for the duration of the block."""
        with self._condition:
            while self._catalog_held:
                self._condition.wait()
            self._line_holders += 1
        try:
            with self._lock_for(line_id):
                yield
        finally:
            with self._condition:
                self._line_holders -= 1
                self._condition.notify_all()

    @contextmanager
    def hold_all(self) -> Iterator[None]:
        """Hold the whole catalog: no line lock is held while inside."""
        with self._condition:
            while self._catalog_held or self._line_holders:
                self._condition.wait()
            self._catalog_held = True
        try:
            yield
        finally:
            with self._condition:
                self._catalog_held = False
                self._condition.notify_all()

    def discard(self, line_id: int) -> None:
        """Forget the lock of a deleted line."""
        with self._registry_lock:
            self._locks.pop(line_id, None)
