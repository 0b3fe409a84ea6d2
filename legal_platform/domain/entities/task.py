"""Domain entity for case to-dos."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from legal_platform.domain.identifiers import new_id


class TaskStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"


@dataclass
class Task:
    """A to-do on a case, assigned by one participant to another (or themselves)."""

    case_id: str
    title: str
    description: str
    assigned_to: str
    assigned_by: str
    due_date: datetime
    status: TaskStatus = TaskStatus.PENDING
    id: str = field(default_factory=lambda: new_id("task"))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
