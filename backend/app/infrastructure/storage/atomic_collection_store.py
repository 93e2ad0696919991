"""Collection store with per-name exclusive load-modify-persist cycles.

Every ``get``/``mutate`` re-reads the backing store; nothing is cached
between calls. The blocking cycle runs on a worker thread, guarded by the
collection's lock, so concurrent requests against one collection are
linearized while different collections proceed independently.
"""

import asyncio
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from app.application.interfaces import BackingStore, CollectionCodec, CollectionStore
from app.domain.entities import CollectionSpec, Mutation
from app.domain.exceptions import CollectionNotStoredError, CorruptCollectionError
from app.infrastructure.storage.collection_locks import CollectionLockRegistry

logger = logging.getLogger(__name__)

R = TypeVar("R")


class AtomicCollectionStore(CollectionStore):
    """Composes a backing store, a codec and a lock registry into guarded collection access."""

    def __init__(
        self,
        backing_store: BackingStore,
        codec: CollectionCodec,
        locks: CollectionLockRegistry | None = None,
    ):
        self._backing_store = backing_store
        self._codec = codec
        self._locks = locks or CollectionLockRegistry()

    # ── Async API ───────────────────────────────────────────────────

    async def get(self, spec: CollectionSpec) -> Any:
        return await asyncio.to_thread(self.get_sync, spec)

    async def mutate(
        self, spec: CollectionSpec, fn: Callable[[Any], Mutation[R]]
    ) -> R:
        return await asyncio.to_thread(self.mutate_sync, spec, fn)

    # ── Blocking API ────────────────────────────────────────────────

    def get_sync(self, spec: CollectionSpec) -> Any:
        """Blocking variant of :meth:`get`."""
        with self._locks.hold(spec.name):
            return self._load(spec)

    def mutate_sync(
        self, spec: CollectionSpec, fn: Callable[[Any], Mutation[R]]
    ) -> R:
        """Blocking variant of :meth:`mutate`."""
        with self._locks.hold(spec.name):
            current = self._load(spec)
            mutation = fn(current)
            if not mutation.changed:
                logger.debug("Collection '%s' unchanged — skipping write", spec.name)
                return mutation.result

            data = self._codec.encode(mutation.value)
            self._backing_store.write(spec.name, data)
            logger.debug("Collection '%s' persisted (%d bytes)", spec.name, len(data))
            return mutation.result

    # ── Internals ───────────────────────────────────────────────────

    def _load(self, spec: CollectionSpec) -> Any:
        """Read and decode a collection; caller must hold its lock."""
        default = spec.default()
        try:
            data = self._backing_store.read(spec.name)
        except CollectionNotStoredError:
            logger.info("Collection '%s' not stored yet — using default value", spec.name)
            return default

        value = self._codec.decode(data)
        if not isinstance(value, type(default)):
            raise CorruptCollectionError(
                f"collection '{spec.name}' holds {type(value).__name__}, "
                f"expected {type(default).__name__}"
            )
        return value
