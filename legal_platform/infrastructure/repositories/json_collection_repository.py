"""Shared implementation for collections stored as one JSON array per key."""

import json
import logging
from abc import abstractmethod
from collections.abc import Callable
from typing import Any, TypeVar

from legal_platform.application.interfaces import CollectionRepository, KeyValueStore
from legal_platform.domain.exceptions import InvalidUpdateError, StorageCorruptedError
from legal_platform.infrastructure.repositories.record_codec import encode_changes, to_record

logger = logging.getLogger(__name__)

E = TypeVar("E")


class JsonCollectionRepository(CollectionRepository[E]):
    """Implements the CollectionRepository port over a KeyValueStore.

    The whole array is read on every access and rewritten on every mutation.
    Mutations hold the store's lock for the collection key for the full
    read-modify-write cycle.
    """

    collection: str = ""
    entity_name: str = ""

    def __init__(self, store: KeyValueStore, prefix: str):
        self._store = store
        self._key = f"{prefix}_{self.collection}"

    @property
    def key(self) -> str:
        return self._key

    @abstractmethod
    def _to_entity(self, record: dict[str, Any]) -> E:
        """Map stored record → domain entity."""
        ...

    def _to_record(self, entity: E) -> dict[str, Any]:
        """Map domain entity → stored record."""
        return to_record(entity)

    def _prepare_changes(self, changes: dict[str, Any]) -> dict[str, Any]:
        """Hook for collections that stamp extra fields on every update."""
        return changes

    # ── Raw access ──────────────────────────────────────────────────

    async def _read(self) -> list[dict[str, Any]]:
        raw = await self._store.get_item(self._key)
        if raw is None:
            return []
        try:
            records = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise StorageCorruptedError(self._key, f"invalid JSON: {exc}") from exc
        if not isinstance(records, list):
            raise StorageCorruptedError(self._key, "expected a JSON array")
        return records

    async def _write(self, records: list[dict[str, Any]]) -> None:
        await self._store.set_item(self._key, json.dumps(records))

    def _decode(self, record: dict[str, Any]) -> E:
        try:
            return self._to_entity(record)
        except (KeyError, TypeError, ValueError) as exc:
            raise StorageCorruptedError(
                self._key, f"malformed {self.entity_name} record: {exc!r}"
            ) from exc

    async def _filter(self, predicate: Callable[[E], bool]) -> list[E]:
        return [entity for entity in map(self._decode, await self._read()) if predicate(entity)]

    # ── CollectionRepository ────────────────────────────────────────

    async def list_all(self) -> list[E]:
        return [self._decode(record) for record in await self._read()]

    async def get_by_id(self, record_id: str) -> E | None:
        for record in await self._read():
            if record.get("id") == record_id:
                return self._decode(record)
        return None

    async def create(self, entity: E) -> E:
        async with self._store.lock_for(self._key):
            records = await self._read()
            records.append(self._to_record(entity))
            await self._write(records)
        logger.debug("Appended %s to %s (%d records)", self.entity_name, self._key, len(records))
        return entity

    async def update(self, record_id: str, changes: dict[str, Any]) -> E | None:
        async with self._store.lock_for(self._key):
            records = await self._read()
            for index, record in enumerate(records):
                if record.get("id") == record_id:
                    break
            else:
                logger.debug("No %s with id '%s' in %s", self.entity_name, record_id, self._key)
                return None

            merged = {**record, **encode_changes(self._prepare_changes(changes))}
            try:
                entity = self._to_entity(merged)
            except (KeyError, TypeError, ValueError) as exc:
                raise InvalidUpdateError(self.entity_name, record_id, repr(exc)) from exc
            records[index] = merged
            await self._write(records)
        return entity

    async def seed_if_empty(self, entities: list[E]) -> bool:
        async with self._store.lock_for(self._key):
            if await self._read():
                return False
            await self._write([self._to_record(entity) for entity in entities])
        logger.info("Seeded %s with %d records", self._key, len(entities))
        return True
