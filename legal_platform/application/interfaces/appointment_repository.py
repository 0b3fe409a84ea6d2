"""Abstract repository interface (port) for Appointment persistence."""

from abc import abstractmethod

from legal_platform.application.interfaces.collection_repository import CollectionRepository
from legal_platform.domain.entities import Appointment, UserRole


class AppointmentRepository(CollectionRepository[Appointment]):
    """Port for appointment persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def list_for_user(self, user_id: str, role: UserRole) -> list[Appointment]:
        """Appointments where the user is the client (or the lawyer, by role)."""
        ...
