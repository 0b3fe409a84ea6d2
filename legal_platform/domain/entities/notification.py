"""Domain entity for user notifications."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from legal_platform.domain.identifiers import new_id


class NotificationType(str, Enum):
    """What kind of event raised the notification."""

    APPOINTMENT = "appointment"
    MESSAGE = "message"
    DOCUMENT = "document"
    TASK = "task"
    CASE = "case"


@dataclass
class Notification:
    user_id: str
    title: str
    message: str
    type: NotificationType
    is_read: bool = False
    link: str | None = None
    id: str = field(default_factory=lambda: new_id("notif"))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
