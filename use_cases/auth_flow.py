"""Authentication flow orchestration (application layer)."""

import logging
from dataclasses import dataclass
from typing import Any, Literal, Optional

import auth
from use_cases.session_models import OnErrorResponse, RedirectTarget
from utils import session_manager

log = logging.getLogger(__name__)

AuthFlowStatus = Literal["CONTINUE", "STOP"]


@dataclass(frozen=True)
class AuthFlowResult:
    """Result contract for auth flow orchestration."""

    status: AuthFlowStatus
    reason: str
    redirect_to: RedirectTarget


def ensure_authenticated_session(provider: Optional["auth.AuthProvider"] = None) -> AuthFlowResult:
    """Run auth-gate orchestration and return a control-flow status."""
    provider = provider or auth.get_auth_provider()
    session_manager.init_session_state()
    install_error_interceptor(provider)

    result = provider.check()
    session_manager.st.session_state.redirect_to = result.redirect_to
    if not result.authenticated:
        return AuthFlowResult(status="STOP", reason="auth_required", redirect_to=result.redirect_to)
    return AuthFlowResult(status="CONTINUE", reason="authenticated", redirect_to=result.redirect_to)


def handle_remote_error(error: Any, provider: Optional["auth.AuthProvider"] = None) -> OnErrorResponse:
    """
    Error-interception path for failed API calls made anywhere in the app.
    Performs the forced logout when the provider classifies the failure as
    UNAUTHENTICATED; otherwise hands the error back unchanged.
    """
    provider = provider or auth.get_auth_provider()
    directive = provider.on_error(error)
    if directive.logout:
        log.info("Remote call rejected as UNAUTHENTICATED, forcing logout")
        outcome = provider.logout()
        session_manager.st.session_state.redirect_to = outcome.redirect_to
    return directive


def install_error_interceptor(provider: "auth.AuthProvider") -> None:
    """Route the provider's swallowed remote failures through handle_remote_error."""
    if provider.on_remote_error is None:
        provider.on_remote_error = lambda error: handle_remote_error(error, provider)
