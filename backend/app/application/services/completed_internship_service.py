"""Application service (use case) for certificate numbers saved on internship completion."""

from typing import Any

from app.application.interfaces import CollectionStore
from app.application.schemas import CompletedInternshipCreate
from app.application.services.record_collection import RecordCollection
from app.domain.entities import COMPLETED_INTERNSHIPS


class CompletedInternshipService:
    """Records which certificate number a student received; numbers are unique here."""

    def __init__(self, store: CollectionStore):
        self._records = RecordCollection(
            store,
            COMPLETED_INTERNSHIPS,
            key_field="certificateNumber",
            entity_type="Completed internship",
        )

    async def list_completed(self) -> list[dict[str, Any]]:
        return await self._records.list_all()

    async def save_certificate_number(self, data: CompletedInternshipCreate) -> dict[str, Any]:
        return await self._records.append_unique(data.model_dump(by_alias=True))
