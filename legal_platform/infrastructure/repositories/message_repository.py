"""Concrete repository for ChatMessage records stored under the messages key."""

import logging
from typing import Any

from legal_platform.application.interfaces import MessageRepository
from legal_platform.domain.entities import ChatMessage, UserRole
from legal_platform.infrastructure.repositories.document_repository import document_from_record
from legal_platform.infrastructure.repositories.json_collection_repository import (
    JsonCollectionRepository,
)
from legal_platform.infrastructure.repositories.record_codec import parse_datetime, required

logger = logging.getLogger(__name__)


class JsonMessageRepository(JsonCollectionRepository[ChatMessage], MessageRepository):
    collection = "messages"
    entity_name = "ChatMessage"

    def _to_entity(self, record: dict[str, Any]) -> ChatMessage:
        attachments = record.get("attachments")
        return ChatMessage(
            id=required(record, "id"),
            case_id=required(record, "caseId"),
            sender_id=required(record, "senderId"),
            sender_name=required(record, "senderName"),
            sender_role=UserRole(required(record, "senderRole")),
            message=required(record, "message"),
            timestamp=parse_datetime(required(record, "timestamp")),
            attachments=(
                [document_from_record(a) for a in attachments]
                if attachments is not None
                else None
            ),
            is_read=record.get("isRead", False),
        )

    async def list_for_case(self, case_id: str) -> list[ChatMessage]:
        return await self._filter(lambda msg: msg.case_id == case_id)

    async def mark_read_for_case(self, case_id: str, reader_id: str) -> int:
        async with self._store.lock_for(self._key):
            records = await self._read()
            changed = 0
            for record in records:
                if (
                    record.get("caseId") == case_id
                    and record.get("senderId") != reader_id
                    and not record.get("isRead", False)
                ):
                    record["isRead"] = True
                    changed += 1
            if changed:
                await self._write(records)
        logger.debug("Marked %d message(s) read in case %s", changed, case_id)
        return changed
