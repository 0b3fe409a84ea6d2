"""Unit tests for application settings configuration."""

from pathlib import Path

from legal_platform.config import Settings


def test_settings_uses_project_env_file_independent_of_cwd():
    """Settings should always include the project-level .env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_project_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_project_env in normalized
    assert str(Path(".env")) in normalized


def test_demo_defaults():
    settings = Settings(_env_file=None)
    assert settings.demo_password == "demo123"
    assert settings.storage_prefix == "legal_platform"
    assert settings.meet_link_base == "https://meet.google.com"
    assert settings.database_url.startswith("sqlite+aiosqlite://")


def test_unknown_storage_backend_falls_back_to_sql():
    settings = Settings(_env_file=None, storage_backend="redis")
    assert settings.storage_backend == "sql"


def test_memory_storage_backend_is_kept():
    settings = Settings(_env_file=None, storage_backend="memory")
    assert settings.storage_backend == "memory"
