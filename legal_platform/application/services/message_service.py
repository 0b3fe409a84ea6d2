"""Application service (use case) for per-case chat."""

from legal_platform.application.interfaces import MessageRepository
from legal_platform.application.schemas.message import MessageCreate
from legal_platform.domain.entities import ChatMessage, Document


class MessageService:
    """Sends and lists case messages and tracks their read state."""

    def __init__(self, repository: MessageRepository):
        self._repository = repository

    async def list_messages(self, case_id: str) -> list[ChatMessage]:
        return await self._repository.list_for_case(case_id)

    async def send_message(self, data: MessageCreate) -> ChatMessage:
        attachments = None
        if data.attachments is not None:
            attachments = [Document(**a.model_dump()) for a in data.attachments]
        message = ChatMessage(
            case_id=data.case_id,
            sender_id=data.sender_id,
            sender_name=data.sender_name,
            sender_role=data.sender_role,
            message=data.message,
            attachments=attachments,
            is_read=data.is_read,
        )
        return await self._repository.create(message)

    async def mark_case_read(self, case_id: str, reader_id: str) -> int:
        """Mark every message in the case sent by someone else as read."""
        return await self._repository.mark_read_for_case(case_id, reader_id)
