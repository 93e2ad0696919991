"""Application service (use case) for certificate records."""

from typing import Any

from app.application.interfaces import CollectionStore
from app.application.schemas import CertificateCreate, Scalar
from app.application.services.record_collection import RecordCollection
from app.domain.entities import CERTIFICATES


class CertificateService:
    """Orchestrates certificate CRUD logic, keyed on ``certificateNumber``.

    Adding does not check for an existing number; only renaming and deleting
    look records up.
    """

    def __init__(self, store: CollectionStore):
        self._records = RecordCollection(
            store, CERTIFICATES, key_field="certificateNumber", entity_type="Certificate"
        )

    async def list_certificates(self) -> list[dict[str, Any]]:
        return await self._records.list_all()

    async def add_certificate(self, data: CertificateCreate) -> dict[str, Any]:
        return await self._records.append(data.model_dump(by_alias=True))

    async def rename_certificate_number(
        self, old_number: Scalar, new_number: Scalar
    ) -> dict[str, Any]:
        # Whether new_number is already taken is not checked.
        def rename(record: dict[str, Any]) -> None:
            record["certificateNumber"] = new_number

        return await self._records.update(old_number, rename)

    async def delete_certificate(self, certificate_number: Scalar) -> None:
        await self._records.remove(certificate_number)
