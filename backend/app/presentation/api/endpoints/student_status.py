"""Student internship status endpoints."""

from typing import Any

from fastapi import APIRouter, Depends

from app.application.schemas import OperationResponse, StudentStatusUpdate
from app.application.services import StudentStatusService
from app.infrastructure.dependencies import get_student_status_service

router = APIRouter(tags=["Student Status"])


@router.get("/api/student-status")
async def list_student_statuses(
    service: StudentStatusService = Depends(get_student_status_service),
) -> list[dict[str, Any]]:
    return await service.list_statuses()


@router.post("/update-student-status", response_model=OperationResponse)
async def update_student_status(
    data: StudentStatusUpdate,
    service: StudentStatusService = Depends(get_student_status_service),
) -> OperationResponse:
    """Create or overwrite the status record of one student."""
    created = await service.update_status(data.student_id, data.status)
    verb = "recorded" if created else "updated"
    return OperationResponse(
        success=True, message=f"Status for {data.student_id} {verb} as {data.status}"
    )
