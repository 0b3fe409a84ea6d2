"""Notification endpoints."""

from fastapi import APIRouter, Depends, status

from legal_platform.application.schemas import NotificationCreate, NotificationResponse
from legal_platform.application.services import NotificationService
from legal_platform.domain.entities import SessionContext
from legal_platform.infrastructure.dependencies import get_notification_service, require_session
from legal_platform.presentation.api.errors import found_or_404

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get("", response_model=list[NotificationResponse])
async def list_notifications(
    session: SessionContext = Depends(require_session),
    service: NotificationService = Depends(get_notification_service),
) -> list[NotificationResponse]:
    notifications = await service.list_notifications(session.user.id)
    return [NotificationResponse.model_validate(n, from_attributes=True) for n in notifications]


@router.get("/unread-count")
async def unread_count(
    session: SessionContext = Depends(require_session),
    service: NotificationService = Depends(get_notification_service),
) -> dict:
    return {"unread": await service.unread_count(session.user.id)}


@router.post("", response_model=NotificationResponse, status_code=status.HTTP_201_CREATED)
async def create_notification(
    data: NotificationCreate,
    session: SessionContext = Depends(require_session),
    service: NotificationService = Depends(get_notification_service),
) -> NotificationResponse:
    notification = await service.create_notification(data)
    return NotificationResponse.model_validate(notification, from_attributes=True)


@router.post("/{notification_id}/read", response_model=NotificationResponse)
async def mark_notification_read(
    notification_id: str,
    session: SessionContext = Depends(require_session),
    service: NotificationService = Depends(get_notification_service),
) -> NotificationResponse:
    notification = found_or_404(
        await service.mark_read(notification_id), "Notification", notification_id
    )
    return NotificationResponse.model_validate(notification, from_attributes=True)
