"""Anonymous session identity.

Carts are scoped to an anonymous identifier stored on the client. The first
request from a browser mints a random UUID and stores it under a fixed key;
later requests read it back. If the client store cannot be used, a
throwaway identifier is returned instead so browsing still works (the cart
just won't survive the next page load).
"""

import logging
import uuid
from typing import Dict, Optional, Protocol

from fastapi import Request, Response

from agrimart.core.config import settings
from agrimart.core.errors import StorageUnavailableError

logger = logging.getLogger(__name__)


class SessionStorage(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class MemorySessionStorage:
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class CookieSessionStorage:
    """Reads the identifier from the request cookie and writes it back on the response.

    Setting a cookie cannot fail on the server side, so this storage never
    raises StorageUnavailableError. A client that drops cookies simply
    arrives without one each time and is handed a fresh identifier (and so
    an empty cart) on every request.
    """

    def __init__(self, request: Request, response: Response):
        self.request = request
        self.response = response

    def get(self, key: str) -> Optional[str]:
        return self.request.cookies.get(key) or None

    def set(self, key: str, value: str) -> None:
        self.response.set_cookie(
            key=key,
            value=value,
            max_age=settings.SESSION_COOKIE_MAX_AGE,
            httponly=True,
            samesite="lax",
        )


class SessionIdentityProvider:
    def __init__(self, storage: SessionStorage, key: Optional[str] = None):
        self.storage = storage
        self.key = key or settings.SESSION_COOKIE_NAME
        self._fallback: Optional[str] = None

    def get_or_create_session_id(self) -> str:
        if self._fallback:
            return self._fallback

        try:
            session_id = self.storage.get(self.key)
            if not session_id:
                session_id = str(uuid.uuid4())
                self.storage.set(self.key, session_id)
            return session_id
        except StorageUnavailableError as e:
            self._fallback = str(uuid.uuid4())
            logger.warning("Session storage unavailable, using non-persistent id: %s", e)
            return self._fallback


def get_session_id(request: Request, response: Response) -> str:
    """FastAPI dependency giving each request its cart's session identifier."""
    provider = SessionIdentityProvider(CookieSessionStorage(request, response))
    return provider.get_or_create_session_id()
