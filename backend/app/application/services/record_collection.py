"""Generic keyed-record operations over a list-shaped collection.

Certificates, tasks, statuses and saved certificate numbers are all lists
of JSON objects identified by one key field. ``RecordCollection`` holds the
append / merge / filter / upsert logic once; each domain service
supplies the collection, the key field and an entity label for errors.

Every lookup miss raises inside the transformation so the store skips the
write.
"""

from collections.abc import Callable
from typing import Any

from app.application.interfaces import CollectionStore
from app.domain.entities import CollectionSpec, Mutation
from app.domain.exceptions import DuplicateEntityError, EntityNotFoundError


class RecordCollection:
    """Keyed CRUD over one list-of-records collection."""

    def __init__(
        self,
        store: CollectionStore,
        spec: CollectionSpec,
        key_field: str,
        entity_type: str,
    ):
        self._store = store
        self._spec = spec
        self._key_field = key_field
        self._entity_type = entity_type

    def _matches(self, record: Any, key: Any) -> bool:
        return isinstance(record, dict) and record.get(self._key_field) == key

    def _index_of(self, records: list[Any], key: Any) -> int:
        for index, record in enumerate(records):
            if self._matches(record, key):
                return index
        return -1

    async def list_all(self) -> list[dict[str, Any]]:
        return await self._store.get(self._spec)

    async def append(self, record: dict[str, Any]) -> dict[str, Any]:
        """Append ``record`` without checking its key."""

        def apply(records: list[Any]) -> Mutation[dict[str, Any]]:
            records.append(record)
            return Mutation(records, record)

        return await self._store.mutate(self._spec, apply)

    async def append_unique(self, record: dict[str, Any]) -> dict[str, Any]:
        """Append ``record`` unless another record already has its key."""
        key = record[self._key_field]

        def apply(records: list[Any]) -> Mutation[dict[str, Any]]:
            if self._index_of(records, key) != -1:
                raise DuplicateEntityError(self._entity_type, self._key_field, str(key))
            records.append(record)
            return Mutation(records, record)

        return await self._store.mutate(self._spec, apply)

    async def update(
        self, key: Any, updater: Callable[[dict[str, Any]], None]
    ) -> dict[str, Any]:
        """Apply ``updater`` in place to the first record with ``key``."""

        def apply(records: list[Any]) -> Mutation[dict[str, Any]]:
            index = self._index_of(records, key)
            if index == -1:
                raise EntityNotFoundError(self._entity_type, key)
            updater(records[index])
            return Mutation(records, records[index])

        return await self._store.mutate(self._spec, apply)

    async def remove(self, key: Any) -> int:
        """Remove every record with ``key``; returns how many were removed."""

        def apply(records: list[Any]) -> Mutation[int]:
            kept = [r for r in records if not self._matches(r, key)]
            removed = len(records) - len(kept)
            if removed == 0:
                raise EntityNotFoundError(self._entity_type, key)
            return Mutation(kept, removed)

        return await self._store.mutate(self._spec, apply)

    async def upsert(self, key: Any, fields: dict[str, Any]) -> bool:
        """Merge ``fields`` into the record with ``key`` or append a new one.

        Returns True when a new record was created.
        """

        def apply(records: list[Any]) -> Mutation[bool]:
            index = self._index_of(records, key)
            if index == -1:
                records.append({self._key_field: key, **fields})
                return Mutation(records, True)
            records[index].update(fields)
            return Mutation(records, False)

        return await self._store.mutate(self._spec, apply)
