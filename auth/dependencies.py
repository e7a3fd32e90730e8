"""
auth/dependencies.py -- FastAPI Depends() helpers for the session passthrough.

The access token is looked up in priority order:
  1. Session cookie (SESSION_COOKIE_NAME) -- set by the provider's browser SDK.
  2. Authorization: Bearer <token> header -- API clients.

Neither helper validates anything; validation is the provider's job.

Layer rule: no imports from api/, web/, or cache/.
  auth/dependencies.py may import from fastapi (for Request) because this
  module is part of the FastAPI dependency injection system.
"""

from __future__ import annotations

from fastapi import Request

from auth.provider import AuthProviderClient
from core.config import get_settings


def get_session_token(request: Request) -> str | None:
    """Return the caller's access token, or None if the request carries none."""
    token = request.cookies.get(get_settings().session_cookie_name)
    if token:
        return token
    auth_header = request.headers.get("Authorization", "")
    if auth_header.startswith("Bearer "):
        return auth_header[7:] or None
    return None


def get_auth_provider(request: Request) -> AuthProviderClient:
    """Return the shared provider client created in the app lifespan."""
    return request.app.state.auth_provider
