"""Domain entity for booked consultations."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from legal_platform.domain.identifiers import new_id


class AppointmentStatus(str, Enum):
    """Booking lifecycle: requested, accepted, held, or called off."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass
class Appointment:
    """A consultation between one client and one lawyer.

    ``date`` is ``YYYY-MM-DD`` and ``time`` is ``HH:MM``; both are kept as the
    strings the booking form submits. ``duration`` is in minutes.
    """

    client_id: str
    lawyer_id: str
    client_name: str
    lawyer_name: str
    date: str
    time: str
    duration: int
    case_type: str
    status: AppointmentStatus = AppointmentStatus.PENDING
    meet_link: str | None = None
    notes: str | None = None
    id: str = field(default_factory=lambda: new_id("apt"))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def involves(self, user_id: str, as_client: bool) -> bool:
        """True when the user is this appointment's client (or lawyer)."""
        return (self.client_id if as_client else self.lawyer_id) == user_id
