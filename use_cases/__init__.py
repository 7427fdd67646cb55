"""Application layer contracts for orchestrating high-level flows."""

from .auth_flow import (
    AuthFlowResult,
    AuthFlowStatus,
    ensure_authenticated_session,
    handle_remote_error,
    install_error_interceptor,
)
from .bootstrap import StartupResult, StartupStatus, run_startup
from .session_models import (
    HOME_ROUTE,
    LOGIN_ROUTE,
    AuthActionResponse,
    CheckResponse,
    Identity,
    LoginError,
    OnErrorResponse,
    RedirectTarget,
)

__all__ = [
    "AuthActionResponse",
    "AuthFlowResult",
    "AuthFlowStatus",
    "CheckResponse",
    "HOME_ROUTE",
    "Identity",
    "LOGIN_ROUTE",
    "LoginError",
    "OnErrorResponse",
    "RedirectTarget",
    "StartupResult",
    "StartupStatus",
    "ensure_authenticated_session",
    "handle_remote_error",
    "install_error_interceptor",
    "run_startup",
]
