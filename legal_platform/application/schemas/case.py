"""Pydantic DTOs for the Case feature."""

from datetime import datetime

from pydantic import BaseModel, Field

from legal_platform.application.schemas.document import DocumentSchema
from legal_platform.application.schemas.task import TaskSchema
from legal_platform.domain.entities import CasePriority, CaseStatus


class CaseCreate(BaseModel):
    """Schema for opening a case. documents/tasks always start empty."""

    client_id: str
    lawyer_id: str
    client_name: str
    lawyer_name: str
    title: str = Field(..., min_length=1, max_length=255, examples=["Contract Review"])
    description: str = ""
    type: str = Field(..., examples=["Corporate Law"])
    status: CaseStatus = CaseStatus.ACTIVE
    priority: CasePriority = CasePriority.MEDIUM
    progress: int = Field(0, ge=0, le=100)


class CaseUpdate(BaseModel):
    """Schema for patching a case — all fields optional."""

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    type: str | None = None
    status: CaseStatus | None = None
    priority: CasePriority | None = None
    progress: int | None = Field(None, ge=0, le=100)
    documents: list[DocumentSchema] | None = None
    tasks: list[TaskSchema] | None = None


class CaseResponse(BaseModel):
    id: str
    client_id: str
    lawyer_id: str
    client_name: str
    lawyer_name: str
    title: str
    description: str
    type: str
    status: CaseStatus
    priority: CasePriority
    progress: int
    documents: list[DocumentSchema]
    tasks: list[TaskSchema]
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
