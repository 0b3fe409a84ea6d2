"""Generic port shared by every record collection."""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

E = TypeVar("E")


class CollectionRepository(ABC, Generic[E]):
    """CRUD contract over one whole-array collection.

    Listing preserves storage order. ``update`` merges ``changes``
    (snake_case field names) over the stored record and returns the merged
    entity, or None when no record has ``record_id`` — in which case nothing
    is written.
    """

    @abstractmethod
    async def list_all(self) -> list[E]:
        ...

    @abstractmethod
    async def get_by_id(self, record_id: str) -> E | None:
        ...

    @abstractmethod
    async def create(self, entity: E) -> E:
        """Append a new record and return it."""
        ...

    @abstractmethod
    async def update(self, record_id: str, changes: dict[str, Any]) -> E | None:
        ...

    @abstractmethod
    async def seed_if_empty(self, entities: list[E]) -> bool:
        """Write ``entities`` only when the collection is empty. True if written."""
        ...
