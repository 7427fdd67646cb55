import logging
from typing import Any, Dict, Optional

import requests

log = logging.getLogger(__name__)

UNAUTHENTICATED = "UNAUTHENTICATED"
NETWORK_ERROR = "NETWORK_ERROR"
BAD_RESPONSE = "BAD_RESPONSE"


class RemoteError(Exception):
    """Failure reported by (or on the way to) the GraphQL endpoint."""

    def __init__(self, message: Optional[str] = None, status_code: Optional[str] = None, name: Optional[str] = None):
        super().__init__(message or "")
        self.message = message
        self.status_code = status_code
        self.name = name

    def __repr__(self):
        return f"RemoteError(message={self.message!r}, status_code={self.status_code!r}, name={self.name!r})"

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, "statusCode": self.status_code, "name": self.name}


def _error_from_graphql(errors: list) -> RemoteError:
    first = errors[0] if errors and isinstance(errors[0], dict) else {}
    extensions = first.get("extensions") or {}
    original = extensions.get("originalError") or {}
    name = original.get("error") if isinstance(original, dict) else None
    return RemoteError(
        message=first.get("message"),
        status_code=extensions.get("code"),
        name=name,
    )


class GraphQLClient:
    def __init__(self, url: str, timeout: float = 10):
        self.url = url
        self.timeout = timeout

    def execute(self, query: str, variables: Optional[Dict[str, Any]] = None, auth_token: Optional[str] = None) -> Dict[str, Any]:
        """
        Sends one GraphQL request and returns its `data` object.
        Raises RemoteError on transport, HTTP or GraphQL failures. No retries.
        """
        headers = {"Content-Type": "application/json"}
        if auth_token:
            headers["Authorization"] = f"Bearer {auth_token}"

        payload = {"query": query, "variables": variables or {}}
        try:
            resp = requests.post(self.url, json=payload, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            log.error(f"❌ Network error while calling {self.url}: {e}")
            raise RemoteError(message=str(e), status_code=NETWORK_ERROR, name=type(e).__name__) from e

        try:
            body = resp.json()
        except ValueError as e:
            if resp.status_code == 401:
                raise RemoteError(message=resp.text or None, status_code=UNAUTHENTICATED) from e
            log.error(f"❌ Non-JSON response from {self.url}: {resp.status_code}")
            raise RemoteError(
                message=f"Unexpected response (HTTP {resp.status_code})",
                status_code=BAD_RESPONSE,
            ) from e

        errors = body.get("errors") if isinstance(body, dict) else None
        if errors:
            err = _error_from_graphql(errors)
            log.info(f"⚠️ GraphQL error from {self.url}: {err.status_code} {err.message}")
            raise err

        if resp.status_code == 401:
            raise RemoteError(message="Unauthorized", status_code=UNAUTHENTICATED)
        if resp.status_code < 200 or resp.status_code >= 300:
            log.error(f"❌ GraphQL endpoint returned HTTP {resp.status_code}")
            raise RemoteError(message=f"HTTP {resp.status_code}", status_code=str(resp.status_code))

        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, dict):
            raise RemoteError(message="Response has no data", status_code=BAD_RESPONSE)
        return data
