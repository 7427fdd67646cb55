import threading
from typing import Optional, Protocol

ACCESS_TOKEN_KEY = "access_token"


class SessionStore(Protocol):
    """Single slot holding at most one access token."""

    def put(self, credential: str) -> None: ...

    def get(self) -> Optional[str]: ...

    def clear(self) -> None: ...


def validate_credential(credential: str) -> str:
    if not isinstance(credential, str) or not credential:
        raise ValueError("Access token must be a non-empty string")
    return credential


class InMemorySessionStore:
    def __init__(self, credential: Optional[str] = None):
        self._lock = threading.Lock()
        self._credential = validate_credential(credential) if credential is not None else None

    def put(self, credential: str) -> None:
        credential = validate_credential(credential)
        with self._lock:
            self._credential = credential

    def get(self) -> Optional[str]:
        with self._lock:
            return self._credential

    def clear(self) -> None:
        with self._lock:
            self._credential = None
