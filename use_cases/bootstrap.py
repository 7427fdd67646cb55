"""Startup orchestration for application bootstrap."""

import logging
from dataclasses import dataclass
from typing import Literal, Tuple

import auth
from use_cases import auth_flow
from utils import session_manager

log = logging.getLogger(__name__)

StartupStatus = Literal["CONTINUE", "STOP"]


@dataclass(frozen=True)
class StartupResult:
    """Result contract for startup/bootstrap orchestration."""

    status: StartupStatus
    planned_steps: Tuple[str, ...]


def run_startup() -> StartupResult:
    """Prepare session state and the auth provider before the auth gate runs."""
    executed_steps = []

    # Restores the access token from the browser cookie on a fresh session.
    session_manager.init_session_state()
    executed_steps.append("init_session_state")

    provider = auth.get_auth_provider()
    auth_flow.install_error_interceptor(provider)
    log.info(f"Auth provider ready (api: {provider.client.url})")
    executed_steps.append("init_auth_provider")

    return StartupResult(status="CONTINUE", planned_steps=tuple(executed_steps))
