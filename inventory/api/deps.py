from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from inventory.config import get_settings
from inventory.database import get_db
from inventory.exceptions import AuthenticationError
from inventory.services.auth_service import AuthService, SessionContext
from inventory.utils.sessions import SessionStore, get_session_store

settings = get_settings()


def get_session_token(request: Request) -> Optional[str]:
    """Read the opaque session token from the session cookie."""
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


def get_auth_service(
    db: Session = Depends(get_db),
    store: SessionStore = Depends(get_session_store),
) -> AuthService:
    return AuthService(db, store)


def get_session_context(
    token: Optional[str] = Depends(get_session_token),
    auth: AuthService = Depends(get_auth_service),
) -> SessionContext:
    """Resolve the caller's session without failing when there is none."""
    return auth.current_session(token)


def require_auth(ctx: SessionContext = Depends(get_session_context)) -> SessionContext:
    """
    Dependency for protected endpoints.

    Raises:
        AuthenticationError: If the request carries no valid session
    """
    if not ctx.authenticated:
        raise AuthenticationError()
    return ctx
