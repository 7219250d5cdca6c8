from dataclasses import dataclass
from sqlalchemy.orm import Session
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from typing import Optional, Tuple
from uuid import UUID
import logging

from inventory.exceptions import ValidationError, ConflictError, InvalidCredentialsError
from inventory.models.user import User
from inventory.schemas.auth import RegisterRequest, LoginRequest
from inventory.utils.passwords import hash_password, verify_password
from inventory.utils.sessions import SessionStore

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6
# bcrypt only looks at the first 72 bytes
MAX_PASSWORD_BYTES = 72


@dataclass(frozen=True)
class SessionContext:
    """
    Identity of the caller for one request.

    Built from the session cookie by the API layer and handed to every
    domain service explicitly.
    """
    authenticated: bool
    user_id: Optional[UUID] = None
    username: Optional[str] = None

    @classmethod
    def anonymous(cls) -> "SessionContext":
        return cls(authenticated=False)


class AuthService:
    """
    Service class for registration, login and session lookup.

    Sessions live in a SessionStore keyed by an opaque token; the caller
    is responsible for putting that token into a cookie.
    """

    def __init__(self, db: Session, store: SessionStore):
        self.db = db
        self.store = store

    def register(self, data: RegisterRequest) -> Tuple[User, str]:
        """
        Create a user and start a session for them.

        Args:
            data: Registration data

        Returns:
            Tuple of (created user, session token)

        Raises:
            ValidationError: If a field is empty or the password is too short
            ConflictError: If the username or email is already taken
        """
        identity = (data.username, data.email, data.full_name)
        if not all(value.strip() for value in identity) or not data.password:
            raise ValidationError("All fields are required")
        if len(data.password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")
        if len(data.password.encode()) > MAX_PASSWORD_BYTES:
            raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes long")

        username = data.username.strip()
        email = data.email.strip()

        existing = (
            self.db.query(User.id)
            .filter(or_(User.username == username, User.email == email))
            .first()
        )
        if existing:
            logger.warning(f"Registration rejected for '{username}': username or email taken")
            raise ConflictError("Username or email already exists")

        user = User(
            username=username,
            email=email,
            password_hash=hash_password(data.password),
            full_name=data.full_name.strip(),
        )
        try:
            self.db.add(user)
            self.db.commit()
        except IntegrityError:
            # Lost a race with a concurrent registration
            self.db.rollback()
            raise ConflictError("Username or email already exists")
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Could not store user '{username}': {e}")
            raise
        self.db.refresh(user)

        token = self._start_session(user)
        logger.info(f"User '{user.username}' registered")
        return user, token

    def login(self, data: LoginRequest) -> Tuple[User, str]:
        """
        Check credentials and start a session.

        Unknown usernames and wrong passwords produce the same error.

        Raises:
            ValidationError: If username or password is empty
            InvalidCredentialsError: If the credentials do not match
        """
        username = data.username.strip()
        if not username or not data.password:
            raise ValidationError("Username and password are required")

        user = self.db.query(User).filter(User.username == username).first()
        if user is None or not verify_password(data.password, user.password_hash):
            logger.warning(f"Failed login attempt for '{username}'")
            raise InvalidCredentialsError()

        token = self._start_session(user)
        logger.info(f"User '{user.username}' logged in")
        return user, token

    def logout(self, token: Optional[str]) -> None:
        """End the session for a token. Unknown or missing tokens are ignored."""
        if token:
            self.store.delete(token)

    def current_session(self, token: Optional[str]) -> SessionContext:
        """
        Resolve a session token into a SessionContext.

        Never raises: an unknown, expired or unreadable session is
        reported as not authenticated.
        """
        if not token:
            return SessionContext.anonymous()

        data = self.store.get(token)
        if not data or not data.get("user_id"):
            return SessionContext.anonymous()

        try:
            user_id = UUID(data["user_id"])
        except (TypeError, ValueError):
            logger.warning("Discarding session with malformed user id")
            return SessionContext.anonymous()

        return SessionContext(authenticated=True, user_id=user_id, username=data.get("username"))

    def _start_session(self, user: User) -> str:
        return self.store.create({"user_id": str(user.id), "username": user.username})
