import json
import time
from typing import Optional
from urllib.parse import unquote

import streamlit as st
import streamlit.components.v1 as components

from infrastructure.storage.session_store import ACCESS_TOKEN_KEY

"""
SESSION STATE CONTRACT

This module owns the Streamlit session state of the dashboard shell.

st.session_state keys:

access_token: str | None
    bearer token of the current session, mirrored to the browser
    default: restored from the `access_token` cookie, else None
    owner: infrastructure/storage/browser_session_store

login_error: dict | None
    last failed login outcome ({"message", "name"}) shown inline on the login form
    default: None
    owner: views/login_view

redirect_to: str
    last redirect target reported by the auth provider
    default: "/login"
    owner: use_cases/auth_flow

browser_token_cleared: bool
    set once the token was cleared in this session; disables localStorage recovery
    default: False
    owner: infrastructure/storage/browser_session_store
"""

COOKIE_MAX_AGE = 2592000  # 30 days
RECOVERY_FLAG_KEY = "access_token_recovery_attempted"
# components.html scripts run in the browser only after the run renders them.
BROWSER_SCRIPT_SETTLE_SECONDS = 1


def read_browser_auth_token() -> Optional[str]:
    try:
        token = st.context.cookies.get(ACCESS_TOKEN_KEY)
    except Exception:
        # During some tests contexts might not be fully available
        token = None
    if not token:
        return None
    return unquote(token)


def init_session_state():
    if ACCESS_TOKEN_KEY not in st.session_state:
        st.session_state[ACCESS_TOKEN_KEY] = read_browser_auth_token()
    if "login_error" not in st.session_state:
        st.session_state.login_error = None
    if "redirect_to" not in st.session_state:
        st.session_state.redirect_to = "/login"
    if "browser_token_cleared" not in st.session_state:
        st.session_state.browser_token_cleared = False


def persist_browser_auth_token(token: str):
    # Both document.cookie and parent.document.cookie for iframe compatibility
    components.html(
        f"""
        <script>
            var token = {json.dumps(token)};
            var cookieStr = "{ACCESS_TOKEN_KEY}=" + encodeURIComponent(token) + "; path=/; max-age={COOKIE_MAX_AGE}; SameSite=Lax";
            document.cookie = cookieStr;
            localStorage.setItem("{ACCESS_TOKEN_KEY}", token);
            sessionStorage.removeItem("{RECOVERY_FLAG_KEY}");
            try {{
                window.parent.document.cookie = cookieStr;
                window.parent.localStorage.setItem("{ACCESS_TOKEN_KEY}", token);
            }} catch (e) {{
                console.log("Cross-origin frame block, normal behavior if different origin");
            }}
        </script>
        """,
        height=0,
    )


def clear_browser_auth_token():
    components.html(
        f"""
        <script>
          var expired = "{ACCESS_TOKEN_KEY}=; path=/; max-age=0; SameSite=Lax";
          document.cookie = expired;
          localStorage.removeItem("{ACCESS_TOKEN_KEY}");
          try {{
              window.parent.document.cookie = expired;
              window.parent.localStorage.removeItem("{ACCESS_TOKEN_KEY}");
          }} catch (e) {{}}
        </script>
        """,
        height=0,
    )


def restore_browser_auth_token():
    """Copy the localStorage token back into the cookie when the browser lost it, then reload once."""
    components.html(
        f"""
        <script>
        (function () {{
          try {{
              var storage = window.parent.localStorage || localStorage;
              var token = storage.getItem("{ACCESS_TOKEN_KEY}");
              var attempted = sessionStorage.getItem("{RECOVERY_FLAG_KEY}");
              var cookies = window.parent.document.cookie || document.cookie;
              var hasCookie = cookies.split("; ").some(function (x) {{
                  return x.trim().startsWith("{ACCESS_TOKEN_KEY}=");
              }});

              if (token && !hasCookie && !attempted) {{
                sessionStorage.setItem("{RECOVERY_FLAG_KEY}", "1");
                var cookieStr = "{ACCESS_TOKEN_KEY}=" + encodeURIComponent(token) + "; path=/; max-age={COOKIE_MAX_AGE}; SameSite=Lax";
                document.cookie = cookieStr;
                try {{ window.parent.document.cookie = cookieStr; }} catch (e) {{}}
                window.parent.location.reload();
              }}
          }} catch (e) {{
              console.error("Token recovery error", e);
          }}
        }})();
        </script>
        """,
        height=0,
    )


def rerun_after_browser_write():
    """Rerun once the persist/clear script has had time to execute."""
    time.sleep(BROWSER_SCRIPT_SETTLE_SECONDS)
    st.rerun()
