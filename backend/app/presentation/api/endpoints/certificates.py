"""Certificate endpoints, including certificate numbers saved on completion."""

from typing import Any

from fastapi import APIRouter, Depends

from app.application.schemas import (
    CertificateCreate,
    CertificateDelete,
    CertificateNumberRename,
    CompletedInternshipCreate,
    MessageResponse,
    OperationResponse,
)
from app.application.services import CertificateService, CompletedInternshipService
from app.infrastructure.dependencies import (
    get_certificate_service,
    get_completed_internship_service,
)

router = APIRouter(tags=["Certificates"])


@router.get("/api/certificate-numbers")
async def list_certificates(
    service: CertificateService = Depends(get_certificate_service),
) -> list[dict[str, Any]]:
    """Return every certificate record."""
    return await service.list_certificates()


@router.post("/add-certificate", response_model=MessageResponse)
async def add_certificate(
    data: CertificateCreate,
    service: CertificateService = Depends(get_certificate_service),
) -> MessageResponse:
    await service.add_certificate(data)
    return MessageResponse(message=f"Certificate for {data.name} added successfully!")


@router.put("/edit-certificate-number", response_model=OperationResponse)
async def edit_certificate_number(
    data: CertificateNumberRename,
    service: CertificateService = Depends(get_certificate_service),
) -> OperationResponse:
    await service.rename_certificate_number(
        data.old_certificate_number, data.new_certificate_number
    )
    return OperationResponse(success=True, message="Certificate number updated successfully")


@router.delete("/delete-certificate", response_model=OperationResponse)
async def delete_certificate(
    data: CertificateDelete,
    service: CertificateService = Depends(get_certificate_service),
) -> OperationResponse:
    await service.delete_certificate(data.certificate_number)
    return OperationResponse(success=True, message="Certificate deleted successfully")


@router.get("/api/completed-internships")
async def list_completed_internships(
    service: CompletedInternshipService = Depends(get_completed_internship_service),
) -> list[dict[str, Any]]:
    return await service.list_completed()


@router.post("/save-certificate-number", response_model=OperationResponse)
async def save_certificate_number(
    data: CompletedInternshipCreate,
    service: CompletedInternshipService = Depends(get_completed_internship_service),
) -> OperationResponse:
    """Save the certificate number issued to a student; numbers must be unique."""
    await service.save_certificate_number(data)
    return OperationResponse(
        success=True,
        message=f"Certificate number {data.certificate_number} saved for {data.student_id}",
    )
