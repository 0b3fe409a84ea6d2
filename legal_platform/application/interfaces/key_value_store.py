"""Abstract key-value storage port — the persistence primitive under every repository."""

import asyncio
from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """Port for string-valued durable storage addressed by fixed keys.

    Mirrors the browser storage API the platform was designed around:
    every value is a complete JSON document, read and written whole.

    Each store also hands out one ``asyncio.Lock`` per key so that
    read-modify-write cycles on the same key are serialized within the
    process, whichever repository performs them.
    """

    def __init__(self) -> None:
        self._locks: dict[str, asyncio.Lock] = {}

    @abstractmethod
    async def get_item(self, key: str) -> str | None:
        """Return the stored string, or None when the key is absent."""
        ...

    @abstractmethod
    async def set_item(self, key: str, value: str) -> None:
        """Store (or overwrite) the value under ``key``."""
        ...

    @abstractmethod
    async def remove_item(self, key: str) -> None:
        """Delete ``key``. Removing an absent key is not an error."""
        ...

    def lock_for(self, key: str) -> asyncio.Lock:
        """The single-writer lock guarding ``key``."""
        lock = self._locks.get(key)
        if lock is None:
            lock = self._locks[key] = asyncio.Lock()
        return lock
