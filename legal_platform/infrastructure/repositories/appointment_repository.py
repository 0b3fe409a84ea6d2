"""Concrete repository for Appointment records stored under the appointments key."""

from typing import Any

from legal_platform.application.interfaces import AppointmentRepository
from legal_platform.domain.entities import Appointment, AppointmentStatus, UserRole
from legal_platform.infrastructure.repositories.json_collection_repository import (
    JsonCollectionRepository,
)
from legal_platform.infrastructure.repositories.record_codec import parse_datetime, required


class JsonAppointmentRepository(JsonCollectionRepository[Appointment], AppointmentRepository):
    collection = "appointments"
    entity_name = "Appointment"

    def _to_entity(self, record: dict[str, Any]) -> Appointment:
        return Appointment(
            id=required(record, "id"),
            client_id=required(record, "clientId"),
            lawyer_id=required(record, "lawyerId"),
            client_name=required(record, "clientName"),
            lawyer_name=required(record, "lawyerName"),
            date=required(record, "date"),
            time=required(record, "time"),
            duration=required(record, "duration"),
            status=AppointmentStatus(required(record, "status")),
            meet_link=record.get("meetLink"),
            notes=record.get("notes"),
            case_type=required(record, "caseType"),
            created_at=parse_datetime(required(record, "createdAt")),
        )

    async def list_for_user(self, user_id: str, role: UserRole) -> list[Appointment]:
        as_client = role == UserRole.CLIENT
        return await self._filter(lambda apt: apt.involves(user_id, as_client))
