"""Concrete repository for Case records stored under the cases key."""

from datetime import datetime, timezone
from typing import Any

from legal_platform.application.interfaces import CaseRepository
from legal_platform.domain.entities import Case, CasePriority, CaseStatus, UserRole
from legal_platform.infrastructure.repositories.document_repository import document_from_record
from legal_platform.infrastructure.repositories.json_collection_repository import (
    JsonCollectionRepository,
)
from legal_platform.infrastructure.repositories.record_codec import parse_datetime, required
from legal_platform.infrastructure.repositories.task_repository import task_from_record


class JsonCaseRepository(JsonCollectionRepository[Case], CaseRepository):
    collection = "cases"
    entity_name = "Case"

    def _to_entity(self, record: dict[str, Any]) -> Case:
        return Case(
            id=required(record, "id"),
            client_id=required(record, "clientId"),
            lawyer_id=required(record, "lawyerId"),
            client_name=required(record, "clientName"),
            lawyer_name=required(record, "lawyerName"),
            title=required(record, "title"),
            description=required(record, "description"),
            type=required(record, "type"),
            status=CaseStatus(required(record, "status")),
            priority=CasePriority(required(record, "priority")),
            progress=required(record, "progress"),
            documents=[document_from_record(d) for d in record.get("documents") or []],
            tasks=[task_from_record(t) for t in record.get("tasks") or []],
            created_at=parse_datetime(required(record, "createdAt")),
            updated_at=parse_datetime(required(record, "updatedAt")),
        )

    def _prepare_changes(self, changes: dict[str, Any]) -> dict[str, Any]:
        # updatedAt is refreshed on every update, whatever the patch says
        return {**changes, "updated_at": datetime.now(timezone.utc)}

    async def list_for_user(self, user_id: str, role: UserRole) -> list[Case]:
        if role == UserRole.CLIENT:
            return await self._filter(lambda case: case.client_id == user_id)
        return await self._filter(lambda case: case.lawyer_id == user_id)
