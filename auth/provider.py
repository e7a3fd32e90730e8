"""
auth/provider.py -- Client for the hosted identity provider.

The site keeps no users and issues no tokens. Sessions live entirely in the
provider (a GoTrue / Supabase Auth compatible REST API); this module forwards
two calls to it:

  get_user(token)  -- GET  {base_url}/auth/v1/user
  sign_out(token)  -- POST {base_url}/auth/v1/logout

Both send the project key in the "apikey" header and the user's access token
as a Bearer token.

Error policy:
  get_user() is a soft lookup. Any failure (no token, rejected token, provider
  down) means "no user" and returns None.
  sign_out() raises AuthProviderError with the provider's message so the route
  can report it to the client.

Layer rule: auth/ imports only stdlib + third-party libraries and core/.
It does NOT import from api/, web/, or cache/.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

logger = logging.getLogger("deta.auth")

_USER_PATH = "/auth/v1/user"
_LOGOUT_PATH = "/auth/v1/logout"


class AuthProviderError(Exception):
    """Raised when the identity provider rejects or fails a request."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class AuthProviderClient:
    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.max_redirects = 3

    @property
    def configured(self) -> bool:
        return bool(self.base_url)

    def _headers(self, access_token: str) -> dict[str, str]:
        headers = {"Authorization": f"Bearer {access_token}"}
        if self.api_key:
            headers["apikey"] = self.api_key
        return headers

    def get_user(self, access_token: str | None) -> dict[str, Any] | None:
        """Return the provider's user object for access_token, or None."""
        if not access_token or not self.configured:
            return None
        try:
            resp = self._session.get(
                self.base_url + _USER_PATH,
                headers=self._headers(access_token),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning("Auth provider user lookup failed: %s", e)
            return None

        if resp.status_code in (401, 403):
            return None
        if not resp.ok:
            logger.warning("Auth provider user lookup returned %d: %s", resp.status_code, _error_message(resp))
            return None
        try:
            user = resp.json()
        except ValueError:
            logger.warning("Auth provider returned invalid JSON for user lookup")
            return None
        return user if isinstance(user, dict) else None

    def sign_out(self, access_token: str | None) -> None:
        """End the provider session for access_token.

        No token means there is no session to end, which counts as success.
        Raises AuthProviderError when the provider refuses or cannot be reached.
        """
        if not self.configured:
            raise AuthProviderError("Auth provider is not configured")
        if not access_token:
            return
        try:
            resp = self._session.post(
                self.base_url + _LOGOUT_PATH,
                headers=self._headers(access_token),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning("Auth provider sign-out failed: %s", e)
            raise AuthProviderError(f"Auth provider unreachable: {e}") from e

        if not resp.ok:
            message = _error_message(resp)
            logger.info("Auth provider refused sign-out (%d): %s", resp.status_code, message)
            raise AuthProviderError(message, status_code=resp.status_code)

    def close(self) -> None:
        self._session.close()


def _error_message(resp: requests.Response) -> str:
    """GoTrue reports errors under several keys depending on version."""
    try:
        data = resp.json()
    except ValueError:
        return resp.reason or f"HTTP {resp.status_code}"
    if isinstance(data, dict):
        for key in ("msg", "message", "error_description", "error"):
            if data.get(key):
                return str(data[key])
    return resp.reason or f"HTTP {resp.status_code}"
