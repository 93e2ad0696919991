"""Application service (use case) for internship domains and their students."""

import logging
from typing import Any

from app.application.interfaces import CollectionStore
from app.application.schemas import InternshipDomainCreate
from app.application.services.record_collection import RecordCollection
from app.domain.entities import INTERNSHIP_DOMAINS, Mutation
from app.domain.exceptions import (
    CorruptCollectionError,
    DuplicateEntityError,
    EntityNotFoundError,
)

logger = logging.getLogger(__name__)


def _same_domain(record: Any, domain: str) -> bool:
    """Domain names match case-insensitively."""
    if not isinstance(record, dict):
        return False
    name = record.get("internshipDomain")
    return isinstance(name, str) and name.lower() == domain.lower()


def _dedupe(ids: list[str]) -> list[str]:
    return list(dict.fromkeys(ids))


def _student_ids_of(record: dict[str, Any]) -> list[Any]:
    ids = record.setdefault("studentIds", [])
    if not isinstance(ids, list):
        raise CorruptCollectionError("'studentIds' must be a list")
    return ids


class InternshipDomainService:
    """Creates domains, attaches students to them and looks them up."""

    def __init__(self, store: CollectionStore):
        self._store = store
        self._records = RecordCollection(
            store, INTERNSHIP_DOMAINS, key_field="internshipDomain", entity_type="Internship domain"
        )

    async def list_domains(self) -> list[dict[str, Any]]:
        return await self._records.list_all()

    async def find_by_domain(self, domain: str) -> dict[str, Any]:
        for record in await self._store.get(INTERNSHIP_DOMAINS):
            if _same_domain(record, domain):
                return record
        raise EntityNotFoundError("Internship domain", domain)

    async def find_by_student(self, student_id: str) -> list[dict[str, Any]]:
        """Return every domain listing ``student_id``; raises if there is none."""
        matches = [
            record
            for record in await self._store.get(INTERNSHIP_DOMAINS)
            if isinstance(record, dict) and student_id in _student_ids_of(record)
        ]
        if not matches:
            raise EntityNotFoundError("Internship domain for student", student_id)
        return matches

    async def add_domain(self, data: InternshipDomainCreate) -> dict[str, Any]:
        # Duplicate domain names are accepted.
        record = data.model_dump(by_alias=True)
        record["studentIds"] = _dedupe(record["studentIds"])
        return await self._records.append(record)

    async def associate_student(self, domain: str, student_id: str) -> dict[str, Any]:
        """Add ``student_id`` to the student list of an existing domain."""

        def apply(records: list[Any]) -> Mutation[dict[str, Any]]:
            record = next((r for r in records if _same_domain(r, domain)), None)
            if record is None:
                raise EntityNotFoundError("Internship domain", domain)
            student_ids = _student_ids_of(record)
            if student_id in student_ids:
                raise DuplicateEntityError("Internship domain", "studentId", student_id)
            student_ids.append(student_id)
            return Mutation(records, record)

        record = await self._store.mutate(INTERNSHIP_DOMAINS, apply)
        logger.info("Associated student %s with domain %s", student_id, record["internshipDomain"])
        return record
