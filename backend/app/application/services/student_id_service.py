"""Application service (use case) for the registry of valid student ids."""

import logging
import re
from typing import Any

from app.application.interfaces import CollectionStore
from app.domain.entities import STUDENT_IDS, Mutation
from app.domain.exceptions import (
    CorruptCollectionError,
    EntityNotFoundError,
    InvalidInputError,
)

logger = logging.getLogger(__name__)

STUDENT_ID_PATTERN = re.compile(r"[A-Za-z0-9]+")
REGISTRY_KEY = "validStudentIds"


def validate_student_id(student_id: str) -> str:
    """Return ``student_id`` if it is non-empty and alphanumeric."""
    if not isinstance(student_id, str) or not STUDENT_ID_PATTERN.fullmatch(student_id):
        raise InvalidInputError("Invalid Student ID. Only alphanumeric IDs allowed.")
    return student_id


def _ids_of(registry: dict[str, Any]) -> list[str]:
    ids = registry.setdefault(REGISTRY_KEY, [])
    if not isinstance(ids, list):
        raise CorruptCollectionError(f"'{REGISTRY_KEY}' must be a list")
    return ids


class StudentIdService:
    """Adds, removes and lists registered student ids. Depends on the store port (DI)."""

    def __init__(self, store: CollectionStore):
        self._store = store

    async def list_student_ids(self) -> list[str]:
        registry = await self._store.get(STUDENT_IDS)
        return list(_ids_of(registry))

    async def add_student_id(self, student_id: str) -> bool:
        """Register ``student_id``; returns False (and writes nothing) if already present."""
        validate_student_id(student_id)

        def apply(registry: dict[str, Any]) -> Mutation[bool]:
            ids = _ids_of(registry)
            if student_id in ids:
                return Mutation.unchanged(False)
            ids.append(student_id)
            return Mutation(registry, True)

        added = await self._store.mutate(STUDENT_IDS, apply)
        if added:
            logger.info("Registered student id %s", student_id)
        return added

    async def delete_student_id(self, student_id: str) -> None:
        if not student_id:
            raise InvalidInputError("Student ID is required")

        def apply(registry: dict[str, Any]) -> Mutation[None]:
            ids = _ids_of(registry)
            kept = [i for i in ids if i != student_id]
            if len(kept) == len(ids):
                raise EntityNotFoundError("Student ID", student_id)
            registry[REGISTRY_KEY] = kept
            return Mutation(registry, None)

        await self._store.mutate(STUDENT_IDS, apply)
        logger.info("Removed student id %s", student_id)
