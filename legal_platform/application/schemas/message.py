"""Pydantic DTOs for per-case chat."""

from datetime import datetime

from pydantic import BaseModel, Field

from legal_platform.application.schemas.document import DocumentSchema
from legal_platform.domain.entities import UserRole


class MessageCreate(BaseModel):
    case_id: str
    sender_id: str
    sender_name: str
    sender_role: UserRole
    message: str = Field(..., min_length=1)
    attachments: list[DocumentSchema] | None = None
    is_read: bool = False


class MessageResponse(BaseModel):
    id: str
    case_id: str
    sender_id: str
    sender_name: str
    sender_role: UserRole
    message: str
    timestamp: datetime
    attachments: list[DocumentSchema] | None = None
    is_read: bool

    model_config = {"from_attributes": True}


class MessageSend(BaseModel):
    """Body of a chat post; sender and case come from the session and the URL."""

    message: str = Field(..., min_length=1)
    attachments: list[DocumentSchema] | None = None
