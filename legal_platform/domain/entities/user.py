"""Domain entities for platform identities and sessions."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from legal_platform.domain.identifiers import new_id


class UserRole(str, Enum):
    """Which side of the lawyer–client relationship a user is on."""

    CLIENT = "client"
    LAWYER = "lawyer"


@dataclass
class User:
    """A signed-up or demo identity.

    Lawyer-only profile fields (specialty, experience, rating, fees, bio)
    stay ``None`` for clients.
    """

    name: str
    email: str
    role: UserRole
    id: str = field(default_factory=lambda: new_id("user"))
    photo: str | None = None
    phone: str | None = None
    address: str | None = None
    specialty: str | None = None
    experience: int | None = None
    rating: float | None = None
    fees: str | None = None
    bio: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class SessionContext:
    """The signed-in identity: present only when both user and token are stored."""

    user: User
    token: str


@dataclass
class AuthResult:
    """Outcome of a login or signup attempt — failures are values, not exceptions."""

    success: bool
    user: User | None = None
    token: str | None = None
    error: str | None = None

    @classmethod
    def ok(cls, user: User, token: str) -> "AuthResult":
        return cls(success=True, user=user, token=token)

    @classmethod
    def failed(cls, error: str) -> "AuthResult":
        return cls(success=False, error=error)
