"""Lawyer directory endpoints and booking a consultation with a listed lawyer."""

from fastapi import APIRouter, Depends, HTTPException, status

from legal_platform.application.schemas import (
    AppointmentCreate,
    AppointmentResponse,
    BookingRequest,
    LawyerResponse,
)
from legal_platform.application.services import AppointmentService, LawyerDirectoryService
from legal_platform.domain.entities import SessionContext, UserRole
from legal_platform.infrastructure.dependencies import (
    get_appointment_service,
    get_lawyer_directory_service,
    require_session,
)
from legal_platform.presentation.api.errors import found_or_404

router = APIRouter(prefix="/lawyers", tags=["Lawyers"])


@router.get("", response_model=list[LawyerResponse])
async def list_lawyers(
    search: str | None = None,
    specialty: str | None = None,
    location: str | None = None,
    directory: LawyerDirectoryService = Depends(get_lawyer_directory_service),
) -> list[LawyerResponse]:
    """Browse the directory by name/specialty text, exact specialty and exact location."""
    lawyers = directory.list_lawyers(search=search, specialty=specialty, location=location)
    return [LawyerResponse.model_validate(lawyer, from_attributes=True) for lawyer in lawyers]


@router.get("/filters")
async def directory_filters(
    directory: LawyerDirectoryService = Depends(get_lawyer_directory_service),
) -> dict:
    return {"specialties": directory.specialties(), "locations": directory.locations()}


@router.get("/{lawyer_id}", response_model=LawyerResponse)
async def get_lawyer(
    lawyer_id: str,
    directory: LawyerDirectoryService = Depends(get_lawyer_directory_service),
) -> LawyerResponse:
    lawyer = found_or_404(directory.get_lawyer(lawyer_id), "Lawyer", lawyer_id)
    return LawyerResponse.model_validate(lawyer, from_attributes=True)


@router.post(
    "/{lawyer_id}/appointments",
    response_model=AppointmentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def book_appointment(
    lawyer_id: str,
    data: BookingRequest,
    session: SessionContext = Depends(require_session),
    directory: LawyerDirectoryService = Depends(get_lawyer_directory_service),
    appointments: AppointmentService = Depends(get_appointment_service),
) -> AppointmentResponse:
    """Request a pending consultation with a listed lawyer. Clients only."""
    if session.user.role != UserRole.CLIENT:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only clients can book appointments",
        )
    lawyer = found_or_404(directory.get_lawyer(lawyer_id), "Lawyer", lawyer_id)
    appointment = await appointments.create_appointment(
        AppointmentCreate(
            client_id=session.user.id,
            lawyer_id=lawyer.id,
            client_name=session.user.name,
            lawyer_name=lawyer.name,
            date=data.date,
            time=data.time,
            duration=data.duration,
            case_type=data.case_type,
            notes=data.notes,
        )
    )
    return AppointmentResponse.model_validate(appointment, from_attributes=True)
