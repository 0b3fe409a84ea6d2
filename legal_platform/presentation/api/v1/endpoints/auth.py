"""Sign-in endpoints: login, signup, logout and the current profile."""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from legal_platform.application.schemas import (
    AuthResponse,
    LoginRequest,
    ProfileUpdate,
    SignupRequest,
    UserResponse,
)
from legal_platform.application.services import SessionService
from legal_platform.domain.entities import AuthResult, SessionContext
from legal_platform.infrastructure.dependencies import get_session_service, require_session

router = APIRouter(prefix="/auth", tags=["Auth"])


def _auth_response(result: AuthResult, failure_status: int) -> AuthResponse:
    if not result.success:
        raise HTTPException(status_code=failure_status, detail=result.error)
    return AuthResponse(
        user=UserResponse.model_validate(result.user, from_attributes=True),
        token=result.token,
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    data: LoginRequest,
    service: SessionService = Depends(get_session_service),
) -> AuthResponse:
    """Sign in one of the demo identities."""
    result = await service.login(data)
    return _auth_response(result, status.HTTP_401_UNAUTHORIZED)


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    data: SignupRequest,
    service: SessionService = Depends(get_session_service),
) -> AuthResponse:
    """Create an account and sign it in."""
    result = await service.signup(data)
    return _auth_response(result, status.HTTP_409_CONFLICT)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(service: SessionService = Depends(get_session_service)) -> Response:
    await service.logout()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/me", response_model=UserResponse)
async def current_user(session: SessionContext = Depends(require_session)) -> UserResponse:
    return UserResponse.model_validate(session.user, from_attributes=True)


@router.put("/profile", response_model=UserResponse)
async def update_profile(
    data: ProfileUpdate,
    session: SessionContext = Depends(require_session),
    service: SessionService = Depends(get_session_service),
) -> UserResponse:
    """Save edits from the profile page over the signed-in user."""
    user = await service.update_profile(data)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    return UserResponse.model_validate(user, from_attributes=True)
