"""Internship domain endpoints."""

from typing import Any

from fastapi import APIRouter, Depends, Query

from app.application.schemas import (
    DomainStudentAssign,
    InternshipDomainCreate,
    OperationResponse,
)
from app.application.services import InternshipDomainService
from app.domain.exceptions import InvalidInputError
from app.infrastructure.dependencies import get_internship_domain_service

router = APIRouter(tags=["Internship Domains"])


@router.get("/api/internship-domains")
async def list_internship_domains(
    service: InternshipDomainService = Depends(get_internship_domain_service),
) -> list[dict[str, Any]]:
    return await service.list_domains()


@router.get("/api/internship-domain")
async def get_internship_domain(
    domain: str | None = Query(None, description="Domain name (case-insensitive)"),
    student_id: str | None = Query(None, alias="studentId", description="Student ID"),
    service: InternshipDomainService = Depends(get_internship_domain_service),
) -> dict[str, Any] | list[dict[str, Any]]:
    """Look up one domain by name, or every domain a student belongs to.

    ``domain`` wins when both are given.
    """
    if domain:
        return await service.find_by_domain(domain)
    if student_id:
        return await service.find_by_student(student_id)
    raise InvalidInputError("Please provide either a domain name or a student ID.")


@router.post("/api/add-internship-domain", response_model=OperationResponse)
async def add_internship_domain(
    data: InternshipDomainCreate,
    service: InternshipDomainService = Depends(get_internship_domain_service),
) -> OperationResponse:
    await service.add_domain(data)
    return OperationResponse(success=True, message="Internship domain added successfully!")


@router.post("/api/add-student-to-domain", response_model=OperationResponse)
async def add_student_to_domain(
    data: DomainStudentAssign,
    service: InternshipDomainService = Depends(get_internship_domain_service),
) -> OperationResponse:
    """Attach a student to an existing domain."""
    await service.associate_student(data.internship_domain, data.student_id)
    return OperationResponse(
        success=True,
        message=f"Student {data.student_id} added to {data.internship_domain}",
    )
