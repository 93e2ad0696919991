"""Pydantic DTOs for the Task feature."""

from typing import Any

from pydantic import Field

from .common import CamelModel, RequiredScalar


class TaskCreate(CamelModel):
    """Schema for creating a task; every field is required."""

    task_id: RequiredScalar = Field(..., examples=["T-100", 7])
    task_name: RequiredScalar = Field(..., examples=["Build landing page"])
    assigned_to: RequiredScalar = Field(..., examples=["STU2024001"])
    status: RequiredScalar = Field(..., examples=["pending"])


class TaskUpdate(CamelModel):
    """Schema for editing a task; ``updated_details`` is merged into the stored record."""

    task_id: RequiredScalar
    updated_details: dict[str, Any] = Field(..., examples=[{"status": "done"}])


class TaskDelete(CamelModel):
    task_id: RequiredScalar
