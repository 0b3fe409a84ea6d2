"""Key-value store adapters and the settings-driven factory that picks one."""

from legal_platform.application.interfaces import KeyValueStore
from legal_platform.config import Settings
from legal_platform.infrastructure.database import create_engine_from_url, ensure_sqlite_directory

from .memory_store import InMemoryKeyValueStore
from .sql_key_value_store import SQLAlchemyKeyValueStore


def build_key_value_store(settings: Settings) -> KeyValueStore:
    """Create the store selected by ``settings.storage_backend``."""
    if settings.storage_backend == "memory":
        return InMemoryKeyValueStore()
    ensure_sqlite_directory(settings.database_url)
    engine = create_engine_from_url(
        settings.database_url,
        echo=(settings.log_level_sql.upper() == "DEBUG"),
    )
    return SQLAlchemyKeyValueStore(engine)


__all__ = [
    "InMemoryKeyValueStore",
    "SQLAlchemyKeyValueStore",
    "build_key_value_store",
]
