"""Abstract repository interface (port) for ChatMessage persistence."""

from abc import abstractmethod

from legal_platform.application.interfaces.collection_repository import CollectionRepository
from legal_platform.domain.entities import ChatMessage


class MessageRepository(CollectionRepository[ChatMessage]):
    """Port for chat message persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def list_for_case(self, case_id: str) -> list[ChatMessage]:
        ...

    @abstractmethod
    async def mark_read_for_case(self, case_id: str, reader_id: str) -> int:
        """Flip ``is_read`` on the case's unread messages not sent by ``reader_id``.

        Returns the number of messages changed.
        """
        ...
