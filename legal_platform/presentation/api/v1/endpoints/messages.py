"""Per-case chat endpoints."""

from fastapi import APIRouter, Depends, status

from legal_platform.application.schemas import MessageCreate, MessageResponse, MessageSend
from legal_platform.application.services import MessageService
from legal_platform.domain.entities import SessionContext
from legal_platform.infrastructure.dependencies import get_message_service, require_session

router = APIRouter(prefix="/cases/{case_id}/messages", tags=["Messages"])


@router.get("", response_model=list[MessageResponse])
async def list_messages(
    case_id: str,
    session: SessionContext = Depends(require_session),
    service: MessageService = Depends(get_message_service),
) -> list[MessageResponse]:
    """The case thread in stored (send) order."""
    messages = await service.list_messages(case_id)
    return [MessageResponse.model_validate(m, from_attributes=True) for m in messages]


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def send_message(
    case_id: str,
    data: MessageSend,
    session: SessionContext = Depends(require_session),
    service: MessageService = Depends(get_message_service),
) -> MessageResponse:
    user = session.user
    message = await service.send_message(
        MessageCreate(
            case_id=case_id,
            sender_id=user.id,
            sender_name=user.name,
            sender_role=user.role,
            message=data.message,
            attachments=data.attachments,
        )
    )
    return MessageResponse.model_validate(message, from_attributes=True)


@router.post("/read")
async def mark_messages_read(
    case_id: str,
    session: SessionContext = Depends(require_session),
    service: MessageService = Depends(get_message_service),
) -> dict:
    """Mark everything the other party sent in this case as read."""
    updated = await service.mark_case_read(case_id, session.user.id)
    return {"updated": updated}
