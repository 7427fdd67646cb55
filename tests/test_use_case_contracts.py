from unittest.mock import MagicMock, patch

import auth
from use_cases import auth_flow, bootstrap
from use_cases.session_models import CheckResponse


@patch("use_cases.auth_flow.session_manager.init_session_state")
def test_auth_flow_contract(_) -> None:
    assert hasattr(auth_flow, "ensure_authenticated_session")
    auth_flow.session_manager.st.session_state.clear()
    provider = MagicMock(spec=auth.AuthProvider)
    provider.check.return_value = CheckResponse(authenticated=False, redirect_to="/login")
    result = auth_flow.ensure_authenticated_session(provider)
    assert isinstance(result, auth_flow.AuthFlowResult)
    assert result.status in {"CONTINUE", "STOP"}


@patch("use_cases.bootstrap.auth.get_auth_provider")
@patch("use_cases.bootstrap.session_manager.init_session_state")
def test_bootstrap_contract(_, __) -> None:
    assert hasattr(bootstrap, "run_startup")
    result = bootstrap.run_startup()
    assert isinstance(result, bootstrap.StartupResult)
    assert result.status in {"CONTINUE", "STOP"}
    assert isinstance(result.planned_steps, tuple)
