from typing import Optional

from infrastructure.storage.session_store import ACCESS_TOKEN_KEY, validate_credential
from utils import session_manager


class BrowserSessionStore:
    """
    Access-token slot backed by st.session_state for the current run and by
    the browser (cookie + localStorage) across reloads.
    """

    def put(self, credential: str) -> None:
        credential = validate_credential(credential)
        session_manager.st.session_state[ACCESS_TOKEN_KEY] = credential
        session_manager.st.session_state.browser_token_cleared = False
        session_manager.persist_browser_auth_token(credential)

    def get(self) -> Optional[str]:
        state = session_manager.st.session_state
        if ACCESS_TOKEN_KEY not in state:
            state[ACCESS_TOKEN_KEY] = session_manager.read_browser_auth_token()
        return state[ACCESS_TOKEN_KEY] or None

    def clear(self) -> None:
        # Keep the key with None so a stale cookie is not restored in this run.
        session_manager.st.session_state[ACCESS_TOKEN_KEY] = None
        session_manager.st.session_state.browser_token_cleared = True
        session_manager.clear_browser_auth_token()
