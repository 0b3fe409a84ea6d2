"""Pydantic DTOs for the Notification feature."""

from datetime import datetime

from pydantic import BaseModel, Field

from legal_platform.domain.entities import NotificationType


class NotificationCreate(BaseModel):
    user_id: str
    title: str = Field(..., min_length=1, max_length=255)
    message: str
    type: NotificationType
    is_read: bool = False
    link: str | None = None


class NotificationResponse(BaseModel):
    id: str
    user_id: str
    title: str
    message: str
    type: NotificationType
    is_read: bool
    created_at: datetime
    link: str | None = None

    model_config = {"from_attributes": True}
