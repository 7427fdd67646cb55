"""Session DTOs shared across application layers."""

from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional

from infrastructure.graphql.graphql_client import UNAUTHENTICATED, RemoteError

RedirectTarget = Literal["/", "/login"]

HOME_ROUTE: RedirectTarget = "/"
LOGIN_ROUTE: RedirectTarget = "/login"

DEFAULT_LOGIN_MESSAGE = "Login failed"
DEFAULT_LOGIN_NAME = "Invalid email or password"


@dataclass(frozen=True)
class Identity:
    id: Optional[str]
    name: Optional[str]
    email: Optional[str] = None
    phone: Optional[str] = None
    job_title: Optional[str] = None
    timezone: Optional[str] = None
    avatar_url: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "Identity":
        """Build from the `me` object returned by the API (camelCase keys)."""
        raw_id = payload.get("id")
        return cls(
            id=str(raw_id) if raw_id is not None else None,
            name=payload.get("name"),
            email=payload.get("email"),
            phone=payload.get("phone"),
            job_title=payload.get("jobTitle"),
            timezone=payload.get("timezone"),
            avatar_url=payload.get("avatarUrl"),
        )


@dataclass(frozen=True)
class LoginError:
    message: str
    name: str

    @classmethod
    def from_exception(cls, exc: Exception) -> "LoginError":
        # Unexpected exceptions carry internal text, never shown on the form.
        message, name = (exc.message, exc.name) if isinstance(exc, RemoteError) else (None, None)
        return cls(message=message or DEFAULT_LOGIN_MESSAGE, name=name or DEFAULT_LOGIN_NAME)

    def to_dict(self) -> Dict[str, str]:
        return {"message": self.message, "name": self.name}


@dataclass(frozen=True)
class AuthActionResponse:
    """Outcome of login/logout."""

    success: bool
    redirect_to: Optional[RedirectTarget] = None
    error: Optional[LoginError] = None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"success": self.success}
        if self.redirect_to is not None:
            result["redirectTo"] = self.redirect_to
        if self.error is not None:
            result["error"] = self.error.to_dict()
        return result


@dataclass(frozen=True)
class CheckResponse:
    authenticated: bool
    redirect_to: RedirectTarget

    def to_dict(self) -> Dict[str, Any]:
        return {"authenticated": self.authenticated, "redirectTo": self.redirect_to}


@dataclass(frozen=True)
class OnErrorResponse:
    """Either a logout directive or the untouched error."""

    logout: bool = False
    error: Any = None

    def to_dict(self) -> Dict[str, Any]:
        if self.logout:
            return {"logout": True}
        return {"error": self.error}


def status_code_of(error: Any) -> Optional[str]:
    if isinstance(error, RemoteError):
        return error.status_code
    if isinstance(error, dict):
        return error.get("statusCode", error.get("status_code"))
    return getattr(error, "status_code", None)


def is_unauthenticated(error: Any) -> bool:
    return status_code_of(error) == UNAUTHENTICATED
