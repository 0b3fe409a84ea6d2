"""Case endpoints."""

from fastapi import APIRouter, Depends, status

from legal_platform.application.schemas import CaseCreate, CaseResponse, CaseUpdate
from legal_platform.application.services import CaseService
from legal_platform.domain.entities import SessionContext
from legal_platform.infrastructure.dependencies import get_case_service, require_session
from legal_platform.presentation.api.errors import found_or_404

router = APIRouter(prefix="/cases", tags=["Cases"])


@router.get("", response_model=list[CaseResponse])
async def list_cases(
    session: SessionContext = Depends(require_session),
    service: CaseService = Depends(get_case_service),
) -> list[CaseResponse]:
    cases = await service.list_cases(session.user.id, session.user.role)
    return [CaseResponse.model_validate(c, from_attributes=True) for c in cases]


@router.get("/{case_id}", response_model=CaseResponse)
async def get_case(
    case_id: str,
    session: SessionContext = Depends(require_session),
    service: CaseService = Depends(get_case_service),
) -> CaseResponse:
    case = found_or_404(await service.get_case(case_id), "Case", case_id)
    return CaseResponse.model_validate(case, from_attributes=True)


@router.post("", response_model=CaseResponse, status_code=status.HTTP_201_CREATED)
async def create_case(
    data: CaseCreate,
    session: SessionContext = Depends(require_session),
    service: CaseService = Depends(get_case_service),
) -> CaseResponse:
    case = await service.create_case(data)
    return CaseResponse.model_validate(case, from_attributes=True)


@router.patch("/{case_id}", response_model=CaseResponse)
async def update_case(
    case_id: str,
    data: CaseUpdate,
    session: SessionContext = Depends(require_session),
    service: CaseService = Depends(get_case_service),
) -> CaseResponse:
    """Patch a case; ``updated_at`` is always refreshed."""
    case = found_or_404(await service.update_case(case_id, data), "Case", case_id)
    return CaseResponse.model_validate(case, from_attributes=True)
