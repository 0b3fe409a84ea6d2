import logging
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_config_logger = logging.getLogger(__name__)

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)
_STORAGE_BACKENDS = frozenset({"sql", "memory"})


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Legal Platform API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:8080"]

    # Storage: one JSON document per key, keys share a common prefix
    storage_backend: str = "sql"
    database_url: str = "sqlite+aiosqlite:///./data/legal_platform.db"
    storage_prefix: str = "legal_platform"

    # Demo accounts & seed data
    demo_password: str = "demo123"
    seed_demo_data: bool = True
    meet_link_base: str = "https://meet.google.com"

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_storage: str = "INFO"          # key-value store & collection repositories

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        """Fall back to the SQL backend when an unknown storage backend is configured."""
        if self.storage_backend not in _STORAGE_BACKENDS:
            _config_logger.warning(
                "Unknown storage backend '%s', using 'sql'", self.storage_backend
            )
            object.__setattr__(self, "storage_backend", "sql")


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
