import streamlit as st

import auth
from utils import session_manager


def render_auth_screen(provider=None):
    provider = provider or auth.get_auth_provider()
    demo = auth.get_demo_credentials()

    # Recover the cookie from localStorage if the browser lost it,
    # unless this session just cleared the token.
    if not st.session_state.get("browser_token_cleared"):
        session_manager.restore_browser_auth_token()

    st.title("🔐 Sign in to CRM Dashboard")

    with st.form("login_form", clear_on_submit=False):
        email = st.text_input("Email", value=demo["email"])
        password = st.text_input("Password", value=demo["password"], type="password")
        submitted = st.form_submit_button("Sign in")
        if submitted:
            if not email.strip():
                st.error("Enter your email.")
            else:
                outcome = provider.login(email.strip(), password)
                if outcome.success:
                    st.session_state.login_error = None
                    st.session_state.redirect_to = outcome.redirect_to
                    session_manager.rerun_after_browser_write()
                else:
                    st.session_state.login_error = outcome.error.to_dict()

    login_error = st.session_state.get("login_error")
    if login_error:
        st.error(f"{login_error['name']}: {login_error['message']}")
