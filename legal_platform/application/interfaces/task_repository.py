"""Abstract repository interface (port) for Task persistence."""

from abc import abstractmethod

from legal_platform.application.interfaces.collection_repository import CollectionRepository
from legal_platform.domain.entities import Task


class TaskRepository(CollectionRepository[Task]):
    """Port for task persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def list_assigned_to(self, user_id: str) -> list[Task]:
        ...

    @abstractmethod
    async def list_assigned_by(self, user_id: str) -> list[Task]:
        ...
