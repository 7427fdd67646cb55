import streamlit as st

import auth
from utils import session_manager


def render_identity_sidebar(provider=None):
    """Shows who is signed in; an unknown identity never blocks the page."""
    provider = provider or auth.get_auth_provider()
    identity = provider.get_identity()

    with st.sidebar:
        if identity is None:
            st.caption("👤 Identity unknown")
        else:
            if identity.avatar_url:
                st.image(identity.avatar_url, width=64)
            st.markdown(f"**{identity.name or 'Unknown user'}**")
            if identity.job_title:
                st.caption(identity.job_title)
            if identity.email:
                st.caption(identity.email)

        if st.button("Log out", key="logout_button"):
            outcome = provider.logout()
            st.session_state.redirect_to = outcome.redirect_to
            session_manager.rerun_after_browser_write()
    return identity


def render_home(provider=None):
    identity = render_identity_sidebar(provider)
    st.title("📊 Dashboard")
    if identity is not None and identity.name:
        st.write(f"Welcome back, {identity.name}!")
    else:
        st.write("Welcome back!")
