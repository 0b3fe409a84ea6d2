"""Pydantic DTOs for the lawyer directory and directory bookings."""

from pydantic import BaseModel, Field


class LawyerResponse(BaseModel):
    id: str
    name: str
    photo: str | None = None
    specialty: str
    experience: int
    rating: float
    location: str
    bio: str
    availability: list[str]
    fees: str

    model_config = {"from_attributes": True}


class BookingRequest(BaseModel):
    """A client's consultation request; both parties come from the session and the URL."""

    date: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$", examples=["2026-10-19"])
    time: str = Field(..., pattern=r"^\d{2}:\d{2}$", examples=["10:00"])
    duration: int = Field(60, gt=0, description="Length in minutes")
    case_type: str = Field(..., min_length=1, examples=["Criminal Law"])
    notes: str | None = None
