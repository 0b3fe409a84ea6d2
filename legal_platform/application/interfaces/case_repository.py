"""Abstract repository interface (port) for Case persistence."""

from abc import abstractmethod

from legal_platform.application.interfaces.collection_repository import CollectionRepository
from legal_platform.domain.entities import Case, UserRole


class CaseRepository(CollectionRepository[Case]):
    """Port for case persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def list_for_user(self, user_id: str, role: UserRole) -> list[Case]:
        ...
