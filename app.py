import os
from datetime import datetime

import streamlit as st

from infrastructure.observability import setup_observability
setup_observability()

from use_cases import auth_flow, bootstrap
from views import home_view, login_view

# --- PAGE SETTINGS ---
st.set_page_config(page_title="CRM Dashboard", layout="wide", initial_sidebar_state="expanded")

FORCE_HTTPS = os.getenv("FORCE_HTTPS", "False").lower() == "true"

# Health Check (Basic load-balancer heartbeat)
if st.query_params.get("health") == "1":
    st.write({"status": "ok", "version": "1.0", "uptime": datetime.utcnow().isoformat()})
    st.stop()

# Bearer tokens must not travel over plain HTTP.
if FORCE_HTTPS:
    try:
        proto = st.context.headers.get("x-forwarded-proto", "http").lower()
    except Exception:
        proto = "http"
    if proto != "https":
        st.error("🚨 Insecure connection. Please use HTTPS.")
        st.stop()

# --- STARTUP ORCHESTRATION ---
startup_result = bootstrap.run_startup()
if startup_result.status == "STOP":
    st.stop()

# --- AUTH GATE ---
auth_result = auth_flow.ensure_authenticated_session()
if auth_result.status == "STOP":
    login_view.render_auth_screen()
    st.stop()

# === MAIN INTERFACE ===
home_view.render_home()
