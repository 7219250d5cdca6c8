from fastapi import APIRouter, Depends, Response, status
from typing import Optional

from inventory.api.deps import get_auth_service, get_session_context, get_session_token
from inventory.config import get_settings
from inventory.schemas.auth import (
    RegisterRequest,
    LoginRequest,
    UserResponse,
    AuthResponse,
    SessionResponse,
)
from inventory.schemas.common import MessageResponse
from inventory.services.auth_service import AuthService, SessionContext

settings = get_settings()

router = APIRouter(prefix="/auth", tags=["Auth"])


def _set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.SESSION_TTL,
        httponly=True,
        secure=settings.is_production,
        samesite=settings.cookie_samesite,
    )


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    description="Create an account and log it in. Passwords need at least 6 characters."
)
def register(
    data: RegisterRequest,
    response: Response,
    auth: AuthService = Depends(get_auth_service)
):
    """
    Register a user.

    - **username**: Unique login name (required)
    - **email**: Unique email address (required)
    - **password**: At least 6 characters (required)
    - **fullName**: Display name (required)
    """
    user, token = auth.register(data)
    _set_session_cookie(response, token)
    return AuthResponse(message="User registered successfully", user=UserResponse.model_validate(user))


@router.post(
    "/login",
    response_model=AuthResponse,
    summary="Log in",
    description="Start a session. Wrong passwords and unknown usernames give the same error."
)
def login(
    data: LoginRequest,
    response: Response,
    auth: AuthService = Depends(get_auth_service)
):
    user, token = auth.login(data)
    _set_session_cookie(response, token)
    return AuthResponse(message="Login successful", user=UserResponse.model_validate(user))


@router.post(
    "/logout",
    response_model=MessageResponse,
    summary="Log out",
    description="End the current session. Calling it without a session is not an error."
)
def logout(
    response: Response,
    token: Optional[str] = Depends(get_session_token),
    auth: AuthService = Depends(get_auth_service)
):
    auth.logout(token)
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        httponly=True,
        secure=settings.is_production,
        samesite=settings.cookie_samesite,
    )
    return MessageResponse(message="Logout successful")


@router.get(
    "/me",
    response_model=SessionResponse,
    summary="Current session",
    description="Report whether the caller is logged in. Never fails."
)
def me(ctx: SessionContext = Depends(get_session_context)):
    return SessionResponse(
        authenticated=ctx.authenticated,
        user_id=ctx.user_id,
        username=ctx.username,
    )
