"""Pydantic DTOs for the Task feature."""

from datetime import datetime

from pydantic import BaseModel, Field

from legal_platform.domain.entities import TaskStatus


class TaskCreate(BaseModel):
    case_id: str
    title: str = Field(..., min_length=1, max_length=255)
    description: str = ""
    assigned_to: str
    assigned_by: str
    due_date: datetime
    status: TaskStatus = TaskStatus.PENDING


class TaskUpdate(BaseModel):
    """Schema for patching a task — all fields optional."""

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    assigned_to: str | None = None
    due_date: datetime | None = None
    status: TaskStatus | None = None


class TaskSchema(BaseModel):
    id: str
    case_id: str
    title: str
    description: str
    assigned_to: str
    assigned_by: str
    due_date: datetime
    status: TaskStatus
    created_at: datetime

    model_config = {"from_attributes": True}


class TaskResponse(TaskSchema):
    """Schema returned to the client."""
