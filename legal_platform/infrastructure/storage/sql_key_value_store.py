"""Durable key-value store backed by a single SQLAlchemy table.

Storage layout:
    storage_entries(key PRIMARY KEY, value TEXT, updated_at)

One row per storage key; the value column always holds the complete
JSON document for that key, so every write replaces the whole row value.
"""

import logging
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from legal_platform.application.interfaces import KeyValueStore
from legal_platform.domain.exceptions import StorageUnavailableError
from legal_platform.infrastructure.database import Base, StorageEntryModel, create_session_factory

logger = logging.getLogger(__name__)


class SQLAlchemyKeyValueStore(KeyValueStore):
    """Infrastructure adapter implementing KeyValueStore on an async SQLAlchemy engine.

    Any SQLAlchemy failure surfaces as ``StorageUnavailableError`` so callers
    never have to know which database sits underneath.
    """

    def __init__(self, engine: AsyncEngine):
        super().__init__()
        self._engine = engine
        self._session_factory = create_session_factory(engine)

    # ── Lifecycle ───────────────────────────────────────────────────

    async def create_tables(self) -> None:
        """Create the storage table if it does not exist yet."""
        try:
            async with self._engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as exc:
            raise StorageUnavailableError("*", f"could not create tables: {exc}") from exc
        logger.debug("Storage tables ready")

    async def dispose(self) -> None:
        await self._engine.dispose()

    # ── KeyValueStore ───────────────────────────────────────────────

    async def get_item(self, key: str) -> str | None:
        try:
            async with self._session_factory() as session:
                entry = await session.get(StorageEntryModel, key)
                return entry.value if entry is not None else None
        except SQLAlchemyError as exc:
            raise StorageUnavailableError(key, f"read failed: {exc}") from exc

    async def set_item(self, key: str, value: str) -> None:
        try:
            async with self._session_factory() as session:
                entry = await session.get(StorageEntryModel, key)
                if entry is None:
                    session.add(StorageEntryModel(key=key, value=value))
                else:
                    entry.value = value
                    entry.updated_at = datetime.now(timezone.utc)
                await session.commit()
        except SQLAlchemyError as exc:
            raise StorageUnavailableError(key, f"write failed: {exc}") from exc
        logger.debug("Stored %s (%d chars)", key, len(value))

    async def remove_item(self, key: str) -> None:
        try:
            async with self._session_factory() as session:
                entry = await session.get(StorageEntryModel, key)
                if entry is not None:
                    await session.delete(entry)
                    await session.commit()
        except SQLAlchemyError as exc:
            raise StorageUnavailableError(key, f"delete failed: {exc}") from exc
