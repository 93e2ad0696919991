"""FastAPI dependency injection — wires infrastructure to application layer."""

from functools import lru_cache

from fastapi import Depends

from app.config import get_settings
from app.application.interfaces import CollectionStore
from app.application.services import (
    CertificateService,
    CompletedInternshipService,
    InternshipDomainService,
    StudentIdService,
    StudentStatusService,
    TaskService,
)
from app.infrastructure.storage.atomic_collection_store import AtomicCollectionStore
from app.infrastructure.storage.json_codec import JsonCollectionCodec
from app.infrastructure.storage.local_file_storage import LocalFileBackingStore


@lru_cache
def get_collection_store() -> CollectionStore:
    """Process-wide collection store, so every request shares one lock registry."""
    settings = get_settings()
    return AtomicCollectionStore(
        backing_store=LocalFileBackingStore(data_dir=settings.data_dir),
        codec=JsonCollectionCodec(),
    )


def get_student_id_service(
    store: CollectionStore = Depends(get_collection_store),
) -> StudentIdService:
    return StudentIdService(store)


def get_certificate_service(
    store: CollectionStore = Depends(get_collection_store),
) -> CertificateService:
    return CertificateService(store)


def get_completed_internship_service(
    store: CollectionStore = Depends(get_collection_store),
) -> CompletedInternshipService:
    return CompletedInternshipService(store)


def get_internship_domain_service(
    store: CollectionStore = Depends(get_collection_store),
) -> InternshipDomainService:
    return InternshipDomainService(store)


def get_task_service(
    store: CollectionStore = Depends(get_collection_store),
) -> TaskService:
    return TaskService(store)


def get_student_status_service(
    store: CollectionStore = Depends(get_collection_store),
) -> StudentStatusService:
    """Provides a StudentStatusService bound to the shared store."""
    return StudentStatusService(store)
