"""Domain entity for the public lawyer directory."""

from dataclasses import dataclass, field


@dataclass
class Lawyer:
    """A listed practitioner clients can browse and book.

    ``availability`` holds short weekday names (``"Mon"`` … ``"Sun"``).
    """

    id: str
    name: str
    specialty: str
    experience: int  # years
    rating: float
    location: str
    bio: str
    fees: str
    photo: str | None = None
    availability: list[str] = field(default_factory=list)
