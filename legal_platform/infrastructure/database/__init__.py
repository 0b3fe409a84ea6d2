from .base import Base
from .session import create_engine_from_url, create_session_factory, ensure_sqlite_directory
from .models import StorageEntryModel

__all__ = [
    "Base",
    "create_engine_from_url",
    "create_session_factory",
    "ensure_sqlite_directory",
    "StorageEntryModel",
]
