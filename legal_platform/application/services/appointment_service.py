"""Application service (use case) for Appointment operations."""

from datetime import datetime, timezone

from legal_platform.application.interfaces import AppointmentRepository
from legal_platform.application.schemas.appointment import AppointmentCreate, AppointmentUpdate
from legal_platform.domain.entities import Appointment, AppointmentStatus, UserRole


class AppointmentService:
    """Orchestrates appointment booking and status changes. Depends on the repository port (DI)."""

    def __init__(self, repository: AppointmentRepository, meet_link_base: str):
        self._repository = repository
        self._meet_link_base = meet_link_base.rstrip("/")

    async def list_appointments(self, user_id: str, role: UserRole) -> list[Appointment]:
        return await self._repository.list_for_user(user_id, role)

    async def create_appointment(self, data: AppointmentCreate) -> Appointment:
        created_at = datetime.now(timezone.utc)
        millis = int(created_at.timestamp() * 1000)
        appointment = Appointment(
            client_id=data.client_id,
            lawyer_id=data.lawyer_id,
            client_name=data.client_name,
            lawyer_name=data.lawyer_name,
            date=data.date,
            time=data.time,
            duration=data.duration,
            status=data.status,
            notes=data.notes,
            case_type=data.case_type,
            meet_link=f"{self._meet_link_base}/meet_{millis}",
            created_at=created_at,
        )
        return await self._repository.create(appointment)

    async def update_appointment(
        self, appointment_id: str, data: AppointmentUpdate
    ) -> Appointment | None:
        """Merge the non-null fields of ``data``. Unknown ids are a silent no-op (None)."""
        return await self._repository.update(
            appointment_id, data.model_dump(exclude_unset=True, exclude_none=True)
        )

    async def accept(self, appointment_id: str) -> Appointment | None:
        return await self._set_status(appointment_id, AppointmentStatus.CONFIRMED)

    async def reject(self, appointment_id: str) -> Appointment | None:
        return await self._set_status(appointment_id, AppointmentStatus.CANCELLED)

    async def cancel(self, appointment_id: str) -> Appointment | None:
        return await self._set_status(appointment_id, AppointmentStatus.CANCELLED)

    async def _set_status(
        self, appointment_id: str, status: AppointmentStatus
    ) -> Appointment | None:
        return await self.update_appointment(appointment_id, AppointmentUpdate(status=status))
