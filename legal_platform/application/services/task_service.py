"""Application service (use case) for Task operations."""

from legal_platform.application.interfaces import TaskRepository
from legal_platform.application.schemas.task import TaskCreate, TaskUpdate
from legal_platform.domain.entities import Task, TaskStatus


class TaskService:
    """Orchestrates task CRUD logic. Depends on the repository port (DI)."""

    def __init__(self, repository: TaskRepository):
        self._repository = repository

    async def list_tasks(self, user_id: str) -> list[Task]:
        """Tasks assigned to the user."""
        return await self._repository.list_assigned_to(user_id)

    async def list_tasks_assigned_by(self, user_id: str) -> list[Task]:
        return await self._repository.list_assigned_by(user_id)

    async def create_task(self, data: TaskCreate) -> Task:
        task = Task(
            case_id=data.case_id,
            title=data.title,
            description=data.description,
            assigned_to=data.assigned_to,
            assigned_by=data.assigned_by,
            due_date=data.due_date,
            status=data.status,
        )
        return await self._repository.create(task)

    async def update_task(self, task_id: str, data: TaskUpdate) -> Task | None:
        """Merge the fields of ``data`` that carry a value; nulls leave the stored value alone."""
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        return await self._repository.update(task_id, changes)

    async def set_task_status(self, task_id: str, status: TaskStatus) -> Task | None:
        return await self.update_task(task_id, TaskUpdate(status=status))
