"""Application service (use case) for Notification operations."""

from legal_platform.application.interfaces import NotificationRepository
from legal_platform.application.schemas.notification import NotificationCreate
from legal_platform.domain.entities import Notification


class NotificationService:
    def __init__(self, repository: NotificationRepository):
        self._repository = repository

    async def list_notifications(self, user_id: str) -> list[Notification]:
        return await self._repository.list_for_user(user_id)

    async def create_notification(self, data: NotificationCreate) -> Notification:
        notification = Notification(
            user_id=data.user_id,
            title=data.title,
            message=data.message,
            type=data.type,
            is_read=data.is_read,
            link=data.link,
        )
        return await self._repository.create(notification)

    async def mark_read(self, notification_id: str) -> Notification | None:
        """Flip only ``is_read`` to True. Idempotent; unknown ids are a no-op (None)."""
        return await self._repository.update(notification_id, {"is_read": True})

    async def unread_count(self, user_id: str) -> int:
        return sum(1 for n in await self.list_notifications(user_id) if not n.is_read)
