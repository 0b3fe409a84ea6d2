"""Pydantic DTOs for login, signup and the current-user profile."""

from datetime import datetime

from pydantic import BaseModel, Field

from legal_platform.domain.entities import UserRole


class LoginRequest(BaseModel):
    email: str = Field(..., examples=["client@demo.com"])
    password: str
    role: UserRole


class SignupRequest(BaseModel):
    """Schema for creating a new account. Lawyer-only fields are optional."""

    name: str = Field(..., min_length=1, max_length=255)
    email: str
    password: str = Field(..., min_length=1)
    role: UserRole
    phone: str | None = None
    specialty: str | None = None
    experience: int | None = Field(None, ge=0)
    fees: str | None = None


class ProfileUpdate(BaseModel):
    """Schema for editing the current user's profile — all fields optional."""

    name: str | None = Field(None, min_length=1, max_length=255)
    phone: str | None = None
    address: str | None = None
    bio: str | None = None
    specialty: str | None = None
    experience: int | None = Field(None, ge=0)
    fees: str | None = None


class UserResponse(BaseModel):
    id: str
    name: str
    email: str
    role: UserRole
    photo: str | None = None
    phone: str | None = None
    address: str | None = None
    specialty: str | None = None
    experience: int | None = None
    rating: float | None = None
    fees: str | None = None
    bio: str | None = None
    created_at: datetime

    model_config = {"from_attributes": True}


class AuthResponse(BaseModel):
    """Successful login/signup: the signed-in user and their session token."""

    user: UserResponse
    token: str
