"""Abstract repository interface (port) for the signed-in session."""

from abc import ABC, abstractmethod
from typing import Any

from legal_platform.domain.entities import User


class SessionRepository(ABC):
    """Port for current-user and token persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def load_user(self) -> User | None:
        """Return the persisted user, or None when absent or unreadable."""
        ...

    @abstractmethod
    async def load_token(self) -> str | None:
        ...

    @abstractmethod
    async def save(self, user: User, token: str) -> None:
        """Persist user and token together."""
        ...

    @abstractmethod
    async def update_user(self, changes: dict[str, Any]) -> User | None:
        """Merge ``changes`` over the persisted user. None when no user is stored."""
        ...

    @abstractmethod
    async def clear(self) -> None:
        """Remove user and token together. Safe when already cleared."""
        ...
