"""Student id registry endpoints."""

from fastapi import APIRouter, Depends

from app.application.schemas import (
    MessageResponse,
    OperationResponse,
    StudentIdRequest,
    StudentIdsResponse,
)
from app.application.services import StudentIdService
from app.infrastructure.dependencies import get_student_id_service

router = APIRouter(tags=["Student IDs"])


@router.get("/api/student-ids", response_model=StudentIdsResponse)
async def list_student_ids(
    service: StudentIdService = Depends(get_student_id_service),
) -> StudentIdsResponse:
    """Return the registry document of valid student ids."""
    return StudentIdsResponse(valid_student_ids=await service.list_student_ids())


@router.post("/add-student", response_model=MessageResponse)
async def add_student(
    data: StudentIdRequest,
    service: StudentIdService = Depends(get_student_id_service),
) -> MessageResponse:
    """Register a student id; registering an existing id is reported, not an error."""
    if await service.add_student_id(data.student_id):
        return MessageResponse(message=f"Student ID {data.student_id} added successfully!")
    return MessageResponse(message=f"Student ID {data.student_id} already exists.")


@router.delete("/delete-student", response_model=OperationResponse)
async def delete_student(
    data: StudentIdRequest,
    service: StudentIdService = Depends(get_student_id_service),
) -> OperationResponse:
    await service.delete_student_id(data.student_id)
    return OperationResponse(
        success=True, message=f"Student ID {data.student_id} deleted successfully!"
    )
