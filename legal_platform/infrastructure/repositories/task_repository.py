"""Concrete repository for Task records stored under the tasks key."""

from typing import Any

from legal_platform.application.interfaces import TaskRepository
from legal_platform.domain.entities import Task, TaskStatus
from legal_platform.infrastructure.repositories.json_collection_repository import (
    JsonCollectionRepository,
)
from legal_platform.infrastructure.repositories.record_codec import parse_datetime, required


def task_from_record(record: dict[str, Any]) -> Task:
    """Map stored record → Task. Also used for the copies embedded in cases."""
    return Task(
        id=required(record, "id"),
        case_id=required(record, "caseId"),
        title=required(record, "title"),
        description=required(record, "description"),
        assigned_to=required(record, "assignedTo"),
        assigned_by=required(record, "assignedBy"),
        due_date=parse_datetime(required(record, "dueDate")),
        status=TaskStatus(required(record, "status")),
        created_at=parse_datetime(required(record, "createdAt")),
    )


class JsonTaskRepository(JsonCollectionRepository[Task], TaskRepository):
    collection = "tasks"
    entity_name = "Task"

    def _to_entity(self, record: dict[str, Any]) -> Task:
        return task_from_record(record)

    async def list_assigned_to(self, user_id: str) -> list[Task]:
        return await self._filter(lambda task: task.assigned_to == user_id)

    async def list_assigned_by(self, user_id: str) -> list[Task]:
        return await self._filter(lambda task: task.assigned_by == user_id)
