"""Task endpoints."""

from fastapi import APIRouter, Depends, status

from legal_platform.application.schemas import TaskCreate, TaskResponse, TaskUpdate
from legal_platform.application.services import TaskService
from legal_platform.domain.entities import SessionContext
from legal_platform.infrastructure.dependencies import get_task_service, require_session
from legal_platform.presentation.api.errors import found_or_404

router = APIRouter(prefix="/tasks", tags=["Tasks"])


@router.get("", response_model=list[TaskResponse])
async def list_tasks(
    assigned_by: bool = False,
    session: SessionContext = Depends(require_session),
    service: TaskService = Depends(get_task_service),
) -> list[TaskResponse]:
    """Tasks assigned to the signed-in user, or assigned by them with ``?assigned_by=true``."""
    if assigned_by:
        tasks = await service.list_tasks_assigned_by(session.user.id)
    else:
        tasks = await service.list_tasks(session.user.id)
    return [TaskResponse.model_validate(t, from_attributes=True) for t in tasks]


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(
    data: TaskCreate,
    session: SessionContext = Depends(require_session),
    service: TaskService = Depends(get_task_service),
) -> TaskResponse:
    task = await service.create_task(data)
    return TaskResponse.model_validate(task, from_attributes=True)


@router.patch("/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: str,
    data: TaskUpdate,
    session: SessionContext = Depends(require_session),
    service: TaskService = Depends(get_task_service),
) -> TaskResponse:
    task = found_or_404(await service.update_task(task_id, data), "Task", task_id)
    return TaskResponse.model_validate(task, from_attributes=True)
