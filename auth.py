import logging
import os
from typing import Any, Callable, Optional

import streamlit as st

from infrastructure.graphql import queries
from infrastructure.graphql.graphql_client import BAD_RESPONSE, GraphQLClient, RemoteError
from infrastructure.storage.browser_session_store import BrowserSessionStore
from infrastructure.storage.session_store import SessionStore
from use_cases.session_models import (
    HOME_ROUTE,
    LOGIN_ROUTE,
    AuthActionResponse,
    CheckResponse,
    Identity,
    LoginError,
    OnErrorResponse,
    is_unauthenticated,
)

log = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.crm.refine.dev/graphql"
DEFAULT_API_TIMEOUT = 10
DEFAULT_DEMO_EMAIL = "leythan@dundermifflin.com"
DEFAULT_DEMO_PASSWORD = "demodemo"


def get_secret(key):
    try:
        return st.secrets.get(key)
    except FileNotFoundError:
        return None


def _setting(key, default=None):
    return get_secret(key) or os.getenv(key) or default


def get_api_url() -> str:
    return _setting("API_URL", DEFAULT_API_URL)


def get_api_timeout() -> float:
    raw = _setting("API_TIMEOUT", DEFAULT_API_TIMEOUT)
    try:
        return float(raw)
    except (TypeError, ValueError):
        log.warning(f"Invalid API_TIMEOUT={raw!r}, using {DEFAULT_API_TIMEOUT}s")
        return float(DEFAULT_API_TIMEOUT)


def get_demo_credentials() -> dict:
    """Credentials prefilled on the login form."""
    return {
        "email": _setting("DEMO_EMAIL", DEFAULT_DEMO_EMAIL),
        "password": _setting("DEMO_PASSWORD", DEFAULT_DEMO_PASSWORD),
    }


class AuthProvider:
    """
    Owns the access-token session against the CRM GraphQL API.

    login/logout/check never raise, get_identity degrades to None and
    on_error only classifies. Failures of check and get_identity are handed
    to `on_remote_error` when one is installed; clearing the token on an
    UNAUTHENTICATED failure happens there (see
    use_cases.auth_flow.install_error_interceptor).
    """

    on_remote_error: Optional[Callable[[Exception], Any]] = None

    def __init__(self, store: SessionStore, client: GraphQLClient):
        self.store = store
        self.client = client

    def _intercept(self, error: Exception) -> None:
        if self.on_remote_error is None:
            return
        try:
            self.on_remote_error(error)
        except Exception as e:
            log.error(f"Remote error interceptor failed: {e!r}")

    def login(self, email: str, password: Optional[str] = None) -> AuthActionResponse:
        # The API's login mutation only takes the email.
        try:
            data = self.client.execute(queries.LOGIN_MUTATION, variables={"email": email})
            token = ((data or {}).get("login") or {}).get("accessToken")
            if not token:
                raise RemoteError(message="Login response has no access token", status_code=BAD_RESPONSE)
            self.store.put(token)
        except Exception as e:
            log.info(f"Login failed: {type(e).__name__}")
            return AuthActionResponse(success=False, error=LoginError.from_exception(e))

        log.info("Login succeeded, access token stored")
        return AuthActionResponse(success=True, redirect_to=HOME_ROUTE)

    def logout(self) -> AuthActionResponse:
        self.store.clear()
        return AuthActionResponse(success=True, redirect_to=LOGIN_ROUTE)

    def check(self) -> CheckResponse:
        try:
            self.client.execute(queries.ME_CHECK_QUERY, auth_token=self.store.get())
        except Exception as e:
            log.debug(f"Auth check failed: {e!r}")
            self._intercept(e)
            return CheckResponse(authenticated=False, redirect_to=LOGIN_ROUTE)
        return CheckResponse(authenticated=True, redirect_to=HOME_ROUTE)

    def on_error(self, error: Any) -> OnErrorResponse:
        if is_unauthenticated(error):
            return OnErrorResponse(logout=True)
        return OnErrorResponse(error=error)

    def get_identity(self) -> Optional[Identity]:
        access_token = self.store.get()
        try:
            data = self.client.execute(queries.ME_IDENTITY_QUERY, auth_token=access_token)
            return Identity.from_payload(data["me"])
        except Exception as e:
            log.warning(f"Identity lookup failed: {e!r}")
            self._intercept(e)
            return None


_auth_provider = None


def get_auth_provider() -> AuthProvider:
    global _auth_provider
    api_url = get_api_url()
    timeout = get_api_timeout()
    if (
        _auth_provider is None
        or _auth_provider.client.url != api_url
        or _auth_provider.client.timeout != timeout
    ):
        client = GraphQLClient(api_url, timeout=timeout)
        _auth_provider = AuthProvider(BrowserSessionStore(), client)
    return _auth_provider
