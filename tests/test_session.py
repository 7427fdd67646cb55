from unittest.mock import patch
import streamlit as st

from utils import session_manager


@patch('utils.session_manager.read_browser_auth_token', return_value="cookie-token")
def test_init_session_state_restores_token(_mock_read):
    st.session_state.clear()
    session_manager.init_session_state()
    assert st.session_state.access_token == "cookie-token"
    assert st.session_state.login_error is None
    assert st.session_state.redirect_to == "/login"
    assert st.session_state.browser_token_cleared is False


@patch('utils.session_manager.read_browser_auth_token')
def test_init_session_state_keeps_existing_token(mock_read):
    st.session_state.clear()
    st.session_state.access_token = None
    session_manager.init_session_state()
    assert st.session_state.access_token is None
    mock_read.assert_not_called()


@patch('utils.session_manager.st')
def test_read_browser_auth_token_unquotes_cookie(mock_st):
    mock_st.context.cookies = {"access_token": "abc%3D%3D"}
    assert session_manager.read_browser_auth_token() == "abc=="


@patch('utils.session_manager.st')
def test_read_browser_auth_token_without_context(mock_st):
    mock_st.context.cookies.get.side_effect = RuntimeError("no context")
    assert session_manager.read_browser_auth_token() is None


@patch('utils.session_manager.components.html')
def test_persist_browser_auth_token_escapes_token(mock_html):
    session_manager.persist_browser_auth_token('to"ken')
    script = mock_html.call_args.args[0]
    assert 'var token = "to\\"ken";' in script
    assert 'localStorage.setItem("access_token", token)' in script


@patch('utils.session_manager.components.html')
def test_clear_browser_auth_token_removes_storage(mock_html):
    session_manager.clear_browser_auth_token()
    script = mock_html.call_args.args[0]
    assert 'localStorage.removeItem("access_token")' in script
    assert "max-age=0" in script


@patch('utils.session_manager.components.html')
def test_restore_browser_auth_token_copies_local_storage_to_cookie(mock_html):
    session_manager.restore_browser_auth_token()
    script = mock_html.call_args.args[0]
    assert 'getItem("access_token")' in script
    assert 'sessionStorage.setItem("access_token_recovery_attempted", "1")' in script
    assert "location.reload()" in script


@patch('streamlit.rerun')
@patch('utils.session_manager.time.sleep')
def test_rerun_after_browser_write_waits_first(mock_sleep, mock_rerun):
    session_manager.rerun_after_browser_write()
    mock_sleep.assert_called_once_with(session_manager.BROWSER_SCRIPT_SETTLE_SECONDS)
    mock_rerun.assert_called_once()
