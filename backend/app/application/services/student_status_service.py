"""Application service (use case) for per-student internship status."""

from typing import Any

from app.application.interfaces import CollectionStore
from app.application.services.record_collection import RecordCollection
from app.domain.entities import STUDENT_STATUS, StudentStatusValue
from app.domain.exceptions import InvalidInputError

_ALLOWED = ", ".join(s.value for s in StudentStatusValue)


class StudentStatusService:
    """Keeps at most one status record per student."""

    def __init__(self, store: CollectionStore):
        self._records = RecordCollection(
            store, STUDENT_STATUS, key_field="studentId", entity_type="Student status"
        )

    async def list_statuses(self) -> list[dict[str, Any]]:
        return await self._records.list_all()

    async def update_status(self, student_id: str, status: str) -> bool:
        """Set the status of ``student_id``; returns True if a new record was created."""
        try:
            value = StudentStatusValue(status)
        except ValueError:
            raise InvalidInputError(f"Invalid status '{status}'. Allowed values: {_ALLOWED}.")
        return await self._records.upsert(student_id, {"status": value.value})
