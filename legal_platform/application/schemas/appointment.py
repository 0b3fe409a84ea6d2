"""Pydantic DTOs for the Appointment feature."""

from datetime import datetime

from pydantic import BaseModel, Field

from legal_platform.domain.entities import AppointmentStatus


class AppointmentCreate(BaseModel):
    """Schema for booking a consultation."""

    client_id: str
    lawyer_id: str
    client_name: str
    lawyer_name: str
    date: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$", examples=["2026-10-19"])
    time: str = Field(..., pattern=r"^\d{2}:\d{2}$", examples=["10:00"])
    duration: int = Field(60, gt=0, description="Length in minutes")
    case_type: str = Field(..., min_length=1, examples=["Criminal Law"])
    status: AppointmentStatus = AppointmentStatus.PENDING
    notes: str | None = None


class AppointmentUpdate(BaseModel):
    """Schema for patching an appointment — all fields optional."""

    date: str | None = Field(None, pattern=r"^\d{4}-\d{2}-\d{2}$")
    time: str | None = Field(None, pattern=r"^\d{2}:\d{2}$")
    duration: int | None = Field(None, gt=0)
    status: AppointmentStatus | None = None
    meet_link: str | None = None
    notes: str | None = None
    case_type: str | None = None


class AppointmentResponse(BaseModel):
    id: str
    client_id: str
    lawyer_id: str
    client_name: str
    lawyer_name: str
    date: str
    time: str
    duration: int
    status: AppointmentStatus
    meet_link: str | None
    notes: str | None
    case_type: str
    created_at: datetime

    model_config = {"from_attributes": True}
