"""Task / project CRUD endpoints."""

from typing import Any

from fastapi import APIRouter, Depends

from app.application.schemas import (
    MessageResponse,
    OperationResponse,
    TaskCreate,
    TaskDelete,
    TaskUpdate,
)
from app.application.services import TaskService
from app.infrastructure.dependencies import get_task_service

router = APIRouter(tags=["Tasks"])


@router.get("/api/tasks")
async def list_tasks(
    service: TaskService = Depends(get_task_service),
) -> list[dict[str, Any]]:
    return await service.list_tasks()


@router.post("/add-task", response_model=MessageResponse)
async def add_task(
    data: TaskCreate,
    service: TaskService = Depends(get_task_service),
) -> MessageResponse:
    await service.add_task(data)
    return MessageResponse(message=f"Task {data.task_name} added successfully!")


@router.put("/edit-task", response_model=OperationResponse)
async def edit_task(
    data: TaskUpdate,
    service: TaskService = Depends(get_task_service),
) -> OperationResponse:
    """Merge the given fields into an existing task."""
    await service.edit_task(data.task_id, data.updated_details)
    return OperationResponse(success=True, message="Task updated successfully")


@router.delete("/delete-task", response_model=OperationResponse)
async def delete_task(
    data: TaskDelete,
    service: TaskService = Depends(get_task_service),
) -> OperationResponse:
    await service.delete_task(data.task_id)
    return OperationResponse(success=True, message="Task deleted successfully")
