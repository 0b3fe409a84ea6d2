"""Appointment booking and status endpoints."""

from fastapi import APIRouter, Depends, status

from legal_platform.application.schemas import (
    AppointmentCreate,
    AppointmentResponse,
    AppointmentUpdate,
)
from legal_platform.application.services import AppointmentService
from legal_platform.domain.entities import SessionContext
from legal_platform.infrastructure.dependencies import get_appointment_service, require_session
from legal_platform.presentation.api.errors import found_or_404

router = APIRouter(prefix="/appointments", tags=["Appointments"])


@router.get("", response_model=list[AppointmentResponse])
async def list_appointments(
    session: SessionContext = Depends(require_session),
    service: AppointmentService = Depends(get_appointment_service),
) -> list[AppointmentResponse]:
    """Appointments where the signed-in user is the client or the lawyer, by role."""
    appointments = await service.list_appointments(session.user.id, session.user.role)
    return [AppointmentResponse.model_validate(a, from_attributes=True) for a in appointments]


@router.post("", response_model=AppointmentResponse, status_code=status.HTTP_201_CREATED)
async def create_appointment(
    data: AppointmentCreate,
    session: SessionContext = Depends(require_session),
    service: AppointmentService = Depends(get_appointment_service),
) -> AppointmentResponse:
    appointment = await service.create_appointment(data)
    return AppointmentResponse.model_validate(appointment, from_attributes=True)


@router.patch("/{appointment_id}", response_model=AppointmentResponse)
async def update_appointment(
    appointment_id: str,
    data: AppointmentUpdate,
    session: SessionContext = Depends(require_session),
    service: AppointmentService = Depends(get_appointment_service),
) -> AppointmentResponse:
    appointment = await service.update_appointment(appointment_id, data)
    appointment = found_or_404(appointment, "Appointment", appointment_id)
    return AppointmentResponse.model_validate(appointment, from_attributes=True)


@router.post("/{appointment_id}/accept", response_model=AppointmentResponse)
async def accept_appointment(
    appointment_id: str,
    session: SessionContext = Depends(require_session),
    service: AppointmentService = Depends(get_appointment_service),
) -> AppointmentResponse:
    appointment = found_or_404(await service.accept(appointment_id), "Appointment", appointment_id)
    return AppointmentResponse.model_validate(appointment, from_attributes=True)


@router.post("/{appointment_id}/reject", response_model=AppointmentResponse)
async def reject_appointment(
    appointment_id: str,
    session: SessionContext = Depends(require_session),
    service: AppointmentService = Depends(get_appointment_service),
) -> AppointmentResponse:
    appointment = found_or_404(await service.reject(appointment_id), "Appointment", appointment_id)
    return AppointmentResponse.model_validate(appointment, from_attributes=True)


@router.post("/{appointment_id}/cancel", response_model=AppointmentResponse)
async def cancel_appointment(
    appointment_id: str,
    session: SessionContext = Depends(require_session),
    service: AppointmentService = Depends(get_appointment_service),
) -> AppointmentResponse:
    appointment = found_or_404(await service.cancel(appointment_id), "Appointment", appointment_id)
    return AppointmentResponse.model_validate(appointment, from_attributes=True)
