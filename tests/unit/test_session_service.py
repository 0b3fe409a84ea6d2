"""Unit tests for the SessionService."""

from typing import Any

import pytest

from legal_platform.application.interfaces import SessionRepository
from legal_platform.application.schemas import LoginRequest, ProfileUpdate, SignupRequest
from legal_platform.application.services import SessionService
from legal_platform.application.services.demo_data import demo_users
from legal_platform.application.services.session_service import (
    INVALID_CREDENTIALS,
    USER_ALREADY_EXISTS,
)
from legal_platform.domain.entities import User, UserRole


class FakeSessionRepository(SessionRepository):
    """In-memory fake repository for unit testing."""

    def __init__(self):
        self.user: User | None = None
        self.token: str | None = None

    async def load_user(self) -> User | None:
        return self.user

    async def load_token(self) -> str | None:
        return self.token

    async def save(self, user: User, token: str) -> None:
        self.user = user
        self.token = token

    async def update_user(self, changes: dict[str, Any]) -> User | None:
        if self.user is None:
            return None
        for name, value in changes.items():
            setattr(self.user, name, value)
        return self.user

    async def clear(self) -> None:
        self.user = None
        self.token = None


@pytest.fixture
def repository() -> FakeSessionRepository:
    return FakeSessionRepository()


@pytest.fixture
def service(repository: FakeSessionRepository) -> SessionService:
    return SessionService(repository, roster=demo_users(), demo_password="demo123")


def _login(email: str, password: str, role: UserRole) -> LoginRequest:
    return LoginRequest(email=email, password=password, role=role)


@pytest.mark.asyncio
async def test_login_with_demo_client(service: SessionService):
    result = await service.login(_login("client@demo.com", "demo123", UserRole.CLIENT))

    assert result.success is True
    assert result.error is None
    assert result.user.id == "1"
    assert result.user.name == "John Client"

    current = await service.get_current_user()
    assert current.id == "1"
    assert await service.is_authenticated() is True


@pytest.mark.asyncio
async def test_login_with_demo_lawyer(service: SessionService):
    result = await service.login(_login("lawyer@demo.com", "demo123", UserRole.LAWYER))
    assert result.success is True
    assert result.user.id == "2"
    assert result.user.specialty == "Criminal Law"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "email, password, role",
    [
        ("client@demo.com", "wrong", UserRole.CLIENT),
        ("client@demo.com", "demo123", UserRole.LAWYER),
        ("nobody@demo.com", "demo123", UserRole.CLIENT),
    ],
)
async def test_login_failures_share_one_generic_error(
    service: SessionService, email: str, password: str, role: UserRole
):
    result = await service.login(_login(email, password, role))
    assert result.success is False
    assert result.user is None
    assert result.error == INVALID_CREDENTIALS


@pytest.mark.asyncio
async def test_failed_login_leaves_existing_session_untouched(
    service: SessionService, repository: FakeSessionRepository
):
    await service.login(_login("lawyer@demo.com", "demo123", UserRole.LAWYER))
    token_before = repository.token

    result = await service.login(_login("client@demo.com", "wrong", UserRole.CLIENT))

    assert result.success is False
    assert repository.user.id == "2"
    assert repository.token == token_before


@pytest.mark.asyncio
async def test_each_login_issues_a_fresh_token(
    service: SessionService, repository: FakeSessionRepository
):
    await service.login(_login("client@demo.com", "demo123", UserRole.CLIENT))
    first = repository.token
    await service.login(_login("client@demo.com", "demo123", UserRole.CLIENT))

    assert first.startswith("token_1_")
    assert repository.token != first


@pytest.mark.asyncio
async def test_signup_creates_and_signs_in_user(service: SessionService):
    result = await service.signup(
        SignupRequest(
            name="Ada Advocate",
            email="ada@example.com",
            password="secret",
            role=UserRole.LAWYER,
            specialty="Family Law",
            experience=5,
            fees="$200/hour",
        )
    )

    assert result.success is True
    assert result.user.id.startswith("user_")
    assert result.user.specialty == "Family Law"
    session = await service.get_session()
    assert session.user.email == "ada@example.com"


@pytest.mark.asyncio
async def test_signup_rejects_demo_email(service: SessionService):
    result = await service.signup(
        SignupRequest(name="X", email="client@demo.com", password="p", role=UserRole.CLIENT)
    )
    assert result.success is False
    assert result.error == USER_ALREADY_EXISTS
    assert await service.get_current_user() is None


@pytest.mark.asyncio
async def test_signup_does_not_remember_earlier_signups(service: SessionService):
    data = SignupRequest(name="Repeat", email="repeat@example.com", password="p", role=UserRole.CLIENT)
    first = await service.signup(data)
    second = await service.signup(data)

    assert first.success is True
    assert second.success is True
    assert first.user.id != second.user.id


@pytest.mark.asyncio
async def test_logout_clears_user_and_token_together(service: SessionService):
    await service.login(_login("client@demo.com", "demo123", UserRole.CLIENT))

    await service.logout()

    assert await service.get_current_user() is None
    assert await service.is_authenticated() is False
    assert await service.get_session() is None


@pytest.mark.asyncio
async def test_logout_is_idempotent(service: SessionService):
    await service.logout()
    await service.logout()
    assert await service.is_authenticated() is False


@pytest.mark.asyncio
async def test_session_requires_both_user_and_token(
    service: SessionService, repository: FakeSessionRepository
):
    repository.token = "token_orphan"
    assert await service.is_authenticated() is True
    assert await service.get_session() is None


@pytest.mark.asyncio
async def test_update_profile_merges_fields(service: SessionService):
    await service.login(_login("client@demo.com", "demo123", UserRole.CLIENT))

    user = await service.update_profile(ProfileUpdate(phone="+1 555 0100", bio="Hi"))

    assert user.phone == "+1 555 0100"
    assert user.bio == "Hi"
    assert user.address == "123 Main St, New York, NY"


@pytest.mark.asyncio
async def test_update_profile_when_signed_out(service: SessionService):
    assert await service.update_profile(ProfileUpdate(name="Ghost")) is None


@pytest.mark.asyncio
async def test_auth_results_carry_the_issued_token(
    service: SessionService, repository: FakeSessionRepository
):
    login = await service.login(_login("client@demo.com", "demo123", UserRole.CLIENT))
    assert login.token == repository.token
    assert login.user == repository.user

    signup = await service.signup(
        SignupRequest(name="New", email="new@example.com", password="p", role=UserRole.CLIENT)
    )
    assert signup.token == repository.token
    assert signup.token != login.token


@pytest.mark.asyncio
async def test_failed_login_has_no_token(service: SessionService):
    result = await service.login(_login("client@demo.com", "wrong", UserRole.CLIENT))

    assert result.token is None


@pytest.mark.asyncio
async def test_update_profile_ignores_null_fields(service: SessionService):
    await service.login(_login("client@demo.com", "demo123", UserRole.CLIENT))

    user = await service.update_profile(ProfileUpdate(name=None, bio="Hi"))

    assert user.name == "John Client"
    assert user.bio == "Hi"
