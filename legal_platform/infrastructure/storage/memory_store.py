"""In-process key-value store — the substitute backend for tests and throwaway runs."""

from legal_platform.application.interfaces import KeyValueStore


class InMemoryKeyValueStore(KeyValueStore):
    """Dict-backed KeyValueStore. Contents vanish with the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        super().__init__()
        self._items: dict[str, str] = dict(initial or {})

    async def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    async def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    async def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._items)
