"""Application service (use case) for Case operations."""

from legal_platform.application.interfaces import CaseRepository
from legal_platform.application.schemas.case import CaseCreate, CaseUpdate
from legal_platform.domain.entities import Case, UserRole


class CaseService:
    """Orchestrates case CRUD logic. Depends on the repository port (DI)."""

    def __init__(self, repository: CaseRepository):
        self._repository = repository

    async def list_cases(self, user_id: str, role: UserRole) -> list[Case]:
        return await self._repository.list_for_user(user_id, role)

    async def get_case(self, case_id: str) -> Case | None:
        return await self._repository.get_by_id(case_id)

    async def create_case(self, data: CaseCreate) -> Case:
        case = Case(
            client_id=data.client_id,
            lawyer_id=data.lawyer_id,
            client_name=data.client_name,
            lawyer_name=data.lawyer_name,
            title=data.title,
            description=data.description,
            type=data.type,
            status=data.status,
            priority=data.priority,
            progress=data.progress,
        )
        case.updated_at = case.created_at
        return await self._repository.create(case)

    async def update_case(self, case_id: str, data: CaseUpdate) -> Case | None:
        """Merge the non-null fields of ``data`` and refresh ``updated_at``.

        Unknown ids are a silent no-op (None).
        """
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        return await self._repository.update(case_id, changes)
