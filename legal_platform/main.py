"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from legal_platform.config import get_settings
from legal_platform.application.interfaces import KeyValueStore
from legal_platform.domain.exceptions import InvalidUpdateError, StorageError
from legal_platform.infrastructure.dependencies import build_demo_seeder
from legal_platform.infrastructure.logging.log_config import setup_logging
from legal_platform.infrastructure.storage import SQLAlchemyKeyValueStore, build_key_value_store
from legal_platform.presentation.api.errors import invalid_update_handler, storage_error_handler
from legal_platform.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


async def _seed_demo_data(store: KeyValueStore) -> None:
    """Seed empty collections for a session that survived the last restart.

    Idempotent — safe to call on every startup.
    """
    try:
        seeded = await build_demo_seeder(store).seed()
    except StorageError as exc:
        logger.warning("Could not seed demo data: %s", exc)
        return
    if not seeded:
        logger.debug("Demo seeding skipped (no session or collections already populated)")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — create storage tables, seed demo data, dispose the engine."""
    settings = get_settings()
    setup_logging()
    store: KeyValueStore = app.state.store

    # 1. Create the storage table (SQL backend only)
    if isinstance(store, SQLAlchemyKeyValueStore):
        await store.create_tables()

    # 2. Seed demo records for an existing session
    if settings.seed_demo_data:
        await _seed_demo_data(store)

    logger.info("Legal platform API ready (storage=%s)", type(store).__name__)

    yield

    # Shutdown
    if isinstance(store, SQLAlchemyKeyValueStore):
        await store.dispose()


def create_app(store: KeyValueStore | None = None) -> FastAPI:
    """Factory function that builds and configures the FastAPI application.

    ``store`` overrides the settings-selected key-value backend (tests pass
    an in-memory store).
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.store = store if store is not None else build_key_value_store(settings)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StorageError, storage_error_handler)
    app.add_exception_handler(InvalidUpdateError, invalid_update_handler)

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "legal_platform.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
