import json
import logging
import secrets
import threading
import time
from functools import lru_cache
from typing import Optional, Any

import redis

from inventory.config import get_settings
from inventory.exceptions import UnexpectedError

logger = logging.getLogger(__name__)

settings = get_settings()


class SessionStore:
    """
    Server-side session storage.

    A session is a small JSON-serializable dict (user id and username)
    stored under an opaque random token. Only the token travels in the
    cookie. Sessions expire a fixed TTL after they were created.
    """

    PREFIX = "session"

    def __init__(self, ttl: int = None):
        self.ttl = ttl or settings.SESSION_TTL

    @staticmethod
    def new_token() -> str:
        return secrets.token_urlsafe(32)

    def _make_key(self, token: str) -> str:
        """Create a namespaced session key."""
        return f"{self.PREFIX}:{token}"

    def create(self, data: dict[str, Any]) -> str:
        raise NotImplementedError

    def get(self, token: str) -> Optional[dict[str, Any]]:
        raise NotImplementedError

    def delete(self, token: str) -> None:
        raise NotImplementedError

    def ping(self) -> bool:
        raise NotImplementedError


class RedisSessionStore(SessionStore):
    """Session store backed by Redis keys with a TTL."""

    def __init__(self, client: redis.Redis = None, ttl: int = None):
        super().__init__(ttl)
        self.client = client or redis.from_url(settings.REDIS_URL, decode_responses=True)

    def create(self, data: dict[str, Any]) -> str:
        """
        Store a new session.

        Args:
            data: Session payload (will be JSON serialized)

        Returns:
            The opaque token identifying the session

        Raises:
            UnexpectedError: If Redis cannot be reached
        """
        token = self.new_token()
        try:
            self.client.setex(self._make_key(token), self.ttl, json.dumps(data, default=str))
        except redis.RedisError as e:
            logger.error(f"Could not store session: {e}")
            raise UnexpectedError("Session store unavailable")
        return token

    def get(self, token: str) -> Optional[dict[str, Any]]:
        """
        Look up a session.

        Returns:
            Session payload, or None if the token is unknown, expired,
            or Redis is unavailable
        """
        try:
            value = self.client.get(self._make_key(token))
            if value:
                return json.loads(value)
            return None
        except (redis.RedisError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read session: {e}")
            return None

    def delete(self, token: str) -> None:
        try:
            self.client.delete(self._make_key(token))
        except redis.RedisError as e:
            logger.warning(f"Could not delete session: {e}")

    def ping(self) -> bool:
        try:
            return bool(self.client.ping())
        except redis.RedisError:
            return False


class MemorySessionStore(SessionStore):
    """Process-local session store for development and tests."""

    def __init__(self, ttl: int = None):
        super().__init__(ttl)
        self._sessions: dict[str, tuple[float, dict[str, Any]]] = {}
        self._lock = threading.Lock()

    def create(self, data: dict[str, Any]) -> str:
        token = self.new_token()
        with self._lock:
            self._sessions[self._make_key(token)] = (time.monotonic() + self.ttl, dict(data))
        return token

    def get(self, token: str) -> Optional[dict[str, Any]]:
        key = self._make_key(token)
        with self._lock:
            entry = self._sessions.get(key)
            if entry is None:
                return None
            expires_at, data = entry
            if expires_at <= time.monotonic():
                del self._sessions[key]
                return None
            return dict(data)

    def delete(self, token: str) -> None:
        with self._lock:
            self._sessions.pop(self._make_key(token), None)

    def ping(self) -> bool:
        return True


@lru_cache
def get_session_store() -> SessionStore:
    """Return the configured session store (one per process)."""
    if settings.SESSION_BACKEND == "memory":
        logger.info("Using in-memory session store")
        return MemorySessionStore()
    return RedisSessionStore()
