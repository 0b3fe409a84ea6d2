"""Domain entity for legal matters."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from legal_platform.domain.entities.document import Document
from legal_platform.domain.entities.task import Task
from legal_platform.domain.identifiers import new_id


class CaseStatus(str, Enum):
    ACTIVE = "active"
    CLOSED = "closed"
    PENDING = "pending"


class CasePriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass
class Case:
    """A legal matter shared by a client and a lawyer.

    ``documents`` and ``tasks`` are denormalized copies embedded in the case
    record; the standalone document and task collections are authoritative.
    """

    client_id: str
    lawyer_id: str
    client_name: str
    lawyer_name: str
    title: str
    description: str
    type: str
    status: CaseStatus = CaseStatus.ACTIVE
    priority: CasePriority = CasePriority.MEDIUM
    progress: int = 0  # 0-100
    documents: list[Document] = field(default_factory=list)
    tasks: list[Task] = field(default_factory=list)
    id: str = field(default_factory=lambda: new_id("case"))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
