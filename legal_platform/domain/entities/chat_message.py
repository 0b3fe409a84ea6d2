"""Domain entity for per-case chat messages."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from legal_platform.domain.entities.document import Document
from legal_platform.domain.entities.user import UserRole
from legal_platform.domain.identifiers import new_id


@dataclass
class ChatMessage:
    """A single message in a case conversation, optionally carrying files."""

    case_id: str
    sender_id: str
    sender_name: str
    sender_role: UserRole
    message: str
    is_read: bool = False
    attachments: list[Document] | None = None
    id: str = field(default_factory=lambda: new_id("msg"))
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
