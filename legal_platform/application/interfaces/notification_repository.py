"""Abstract repository interface (port) for Notification persistence."""

from abc import abstractmethod

from legal_platform.application.interfaces.collection_repository import CollectionRepository
from legal_platform.domain.entities import Notification


class NotificationRepository(CollectionRepository[Notification]):
    """Port for notification persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def list_for_user(self, user_id: str) -> list[Notification]:
        ...
