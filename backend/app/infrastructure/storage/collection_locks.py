"""Per-collection locks for exclusive read-modify-write cycles.

Each collection name gets its own ``threading.Lock`` so work on one
collection never waits on another. Only protects within a single process.
"""

import threading
from collections.abc import Iterator
from contextlib import contextmanager


class CollectionLockRegistry:
    """Lazily creates and hands out one lock per collection name."""

    def __init__(self) -> None:
        self._registry_lock = threading.Lock()
        self._locks: dict[str, threading.Lock] = {}

    def lock_for(self, name: str) -> threading.Lock:
        """Return the lock for ``name``, creating it on first request."""
        lock = self._locks.get(name)
        if lock is not None:
            return lock
        with self._registry_lock:
            # Another thread may have inserted it while we waited.
            lock = self._locks.get(name)
            if lock is None:
                lock = threading.Lock()
                self._locks[name] = lock
            return lock

    @contextmanager
    def hold(self, name: str) -> Iterator[None]:
        """Hold the lock for ``name`` for the duration of the ``with`` block."""
        with self.lock_for(name):
            yield

    def __len__(self) -> int:
        return len(self._locks)
