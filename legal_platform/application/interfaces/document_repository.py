"""Abstract repository interface (port) for Document persistence."""

from abc import abstractmethod

from legal_platform.application.interfaces.collection_repository import CollectionRepository
from legal_platform.domain.entities import Document


class DocumentRepository(CollectionRepository[Document]):
    """Port for document metadata persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def list_for_case(self, case_id: str) -> list[Document]:
        ...
