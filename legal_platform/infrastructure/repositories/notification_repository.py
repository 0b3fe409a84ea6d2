"""Concrete repository for Notification records stored under the notifications key."""

from typing import Any

from legal_platform.application.interfaces import NotificationRepository
from legal_platform.domain.entities import Notification, NotificationType
from legal_platform.infrastructure.repositories.json_collection_repository import (
    JsonCollectionRepository,
)
from legal_platform.infrastructure.repositories.record_codec import parse_datetime, required


class JsonNotificationRepository(JsonCollectionRepository[Notification], NotificationRepository):
    collection = "notifications"
    entity_name = "Notification"

    def _to_entity(self, record: dict[str, Any]) -> Notification:
        return Notification(
            id=required(record, "id"),
            user_id=required(record, "userId"),
            title=required(record, "title"),
            message=required(record, "message"),
            type=NotificationType(required(record, "type")),
            is_read=record.get("isRead", False),
            created_at=parse_datetime(required(record, "createdAt")),
            link=record.get("link"),
        )

    async def list_for_user(self, user_id: str) -> list[Notification]:
        return await self._filter(lambda notif: notif.user_id == user_id)
