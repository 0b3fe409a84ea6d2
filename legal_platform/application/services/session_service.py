"""Application service for sign-in state: login, signup, logout and route-guard queries."""

import logging
import secrets
from collections.abc import Sequence
from uuid import uuid4

from legal_platform.application.interfaces import SessionRepository
from legal_platform.application.schemas.auth import LoginRequest, ProfileUpdate, SignupRequest
from legal_platform.domain.entities import AuthResult, SessionContext, User

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"
USER_ALREADY_EXISTS = "User already exists"


class SessionService:
    """Establishes, inspects and tears down the current signed-in identity.

    Credentials are checked against a fixed roster of demo identities that
    all share one password. Every read goes back to the repository; there is
    no in-memory session cache.
    """

    def __init__(
        self,
        repository: SessionRepository,
        roster: Sequence[User],
        demo_password: str,
    ):
        self._repository = repository
        self._roster = list(roster)
        self._demo_password = demo_password

    @staticmethod
    def _issue_token(user: User) -> str:
        return f"token_{user.id}_{uuid4().hex}"

    async def login(self, credentials: LoginRequest) -> AuthResult:
        """Sign in a roster identity matched by exact (email, role).

        Unknown email, wrong role and wrong password all yield the same
        failure, and a failed attempt leaves any existing session in place.
        """
        user = next(
            (
                u
                for u in self._roster
                if u.email == credentials.email and u.role == credentials.role
            ),
            None,
        )
        password_ok = secrets.compare_digest(
            credentials.password.encode("utf-8"), self._demo_password.encode("utf-8")
        )
        if user is None or not password_ok:
            logger.info("Login rejected for %s (%s)", credentials.email, credentials.role.value)
            return AuthResult.failed(INVALID_CREDENTIALS)

        token = self._issue_token(user)
        await self._repository.save(user, token)
        logger.info("User %s signed in as %s", user.id, user.role.value)
        return AuthResult.ok(user, token)

    async def signup(self, data: SignupRequest) -> AuthResult:
        """Create and sign in a new identity.

        Only the fixed roster is checked for a duplicate email; accounts
        created by earlier signups are not remembered anywhere.
        """
        if any(u.email == data.email for u in self._roster):
            return AuthResult.failed(USER_ALREADY_EXISTS)

        user = User(
            name=data.name,
            email=data.email,
            role=data.role,
            phone=data.phone,
            specialty=data.specialty,
            experience=data.experience,
            fees=data.fees,
        )
        token = self._issue_token(user)
        await self._repository.save(user, token)
        logger.info("Signed up user %s as %s", user.id, user.role.value)
        return AuthResult.ok(user, token)

    async def logout(self) -> None:
        await self._repository.clear()

    async def get_current_user(self) -> User | None:
        return await self._repository.load_user()

    async def is_authenticated(self) -> bool:
        """True iff a token is stored; the user record is not re-validated."""
        return bool(await self._repository.load_token())

    async def get_session(self) -> SessionContext | None:
        """The explicit session value, or None unless both user and token are stored."""
        token = await self._repository.load_token()
        if not token:
            return None
        user = await self._repository.load_user()
        if user is None:
            return None
        return SessionContext(user=user, token=token)

    async def update_profile(self, data: ProfileUpdate) -> User | None:
        """Merge edited, non-null profile fields over the current user. None when signed out."""
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        return await self._repository.update_user(changes)
