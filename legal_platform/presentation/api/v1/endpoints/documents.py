"""Case document listing and upload endpoints (metadata only)."""

from fastapi import APIRouter, Depends, status

from legal_platform.application.schemas import DocumentResponse, DocumentUpload
from legal_platform.application.services import DocumentService
from legal_platform.domain.entities import SessionContext
from legal_platform.infrastructure.dependencies import get_document_service, require_session

router = APIRouter(prefix="/cases/{case_id}/documents", tags=["Documents"])


@router.get("", response_model=list[DocumentResponse])
async def list_documents(
    case_id: str,
    search: str | None = None,
    folder: str | None = None,
    session: SessionContext = Depends(require_session),
    service: DocumentService = Depends(get_document_service),
) -> list[DocumentResponse]:
    """Documents of a case filtered by name substring and folder (``all`` = any)."""
    documents = await service.list_documents(case_id, search=search, folder=folder)
    return [DocumentResponse.model_validate(d, from_attributes=True) for d in documents]


@router.post("", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED)
async def upload_document(
    case_id: str,
    data: DocumentUpload,
    session: SessionContext = Depends(require_session),
    service: DocumentService = Depends(get_document_service),
) -> DocumentResponse:
    document = await service.upload_document(case_id, session.user.id, data)
    return DocumentResponse.model_validate(document, from_attributes=True)
