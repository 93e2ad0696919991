"""Application service (use case) for tasks / projects."""

from typing import Any

from app.application.interfaces import CollectionStore
from app.application.schemas import Scalar, TaskCreate
from app.application.services.record_collection import RecordCollection
from app.domain.entities import TASKS


class TaskService:
    """Orchestrates task CRUD logic, keyed on ``taskId``."""

    def __init__(self, store: CollectionStore):
        self._records = RecordCollection(store, TASKS, key_field="taskId", entity_type="Task")

    async def list_tasks(self) -> list[dict[str, Any]]:
        return await self._records.list_all()

    async def add_task(self, data: TaskCreate) -> dict[str, Any]:
        return await self._records.append(data.model_dump(by_alias=True))

    async def edit_task(self, task_id: Scalar, updated_details: dict[str, Any]) -> dict[str, Any]:
        """Shallow-merge ``updated_details`` over the stored task."""

        def merge(record: dict[str, Any]) -> None:
            record.update(updated_details)

        return await self._records.update(task_id, merge)

    async def delete_task(self, task_id: Scalar) -> None:
        await self._records.remove(task_id)
