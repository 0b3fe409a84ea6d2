"""HTTP error translation shared by all API versions."""

import logging
from typing import TypeVar

from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse

from legal_platform.domain.exceptions import EntityNotFoundError, InvalidUpdateError, StorageError

logger = logging.getLogger(__name__)

T = TypeVar("T")

STORAGE_UNAVAILABLE_DETAIL = "Storage is temporarily unavailable"


def found_or_404(entity: T | None, entity_type: str, entity_id: str) -> T:
    """Return ``entity``, or raise 404 when the store reported an unknown id."""
    if entity is None:
        error = EntityNotFoundError(entity_type, entity_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    return entity


async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    """Turn any storage failure into a generic 503; details only go to the log."""
    logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": STORAGE_UNAVAILABLE_DETAIL},
    )


async def invalid_update_handler(request: Request, exc: InvalidUpdateError) -> JSONResponse:
    """A patch that would leave the record unreadable is refused with 422."""
    logger.warning("Rejected update on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": str(exc)},
    )
