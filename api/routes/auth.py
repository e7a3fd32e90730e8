"""
api/routes/auth.py -- Session passthrough endpoints.

Routes:
  GET    /api/auth/profile  -- {"user": <provider user object or null>}, always 200
  DELETE /api/auth/logout   -- {"success": true} 200, or {"error": "<message>"} 400

Both are public: they act on whatever session the caller presents and leave
every decision to the identity provider.

Security:
  Both endpoints are rate-limited per IP (AUTH_RATE_LIMIT, default 30/minute).
  Cache-Control: no-store on every response -- they describe one user's session.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from api.limiter import auth_rate_limit, limiter
from api.models import AuthErrorResponse, LogoutResponse, ProfileResponse
from auth.dependencies import get_auth_provider, get_session_token
from auth.provider import AuthProviderClient, AuthProviderError
from core.config import get_settings

router = APIRouter()


# @limiter.limit goes beneath @router so the registered endpoint is the limited one.
@router.get("/auth/profile", response_model=ProfileResponse)
@limiter.limit(auth_rate_limit)
def profile(
    request: Request,
    provider: AuthProviderClient = Depends(get_auth_provider),
) -> JSONResponse:
    """Return the signed-in user, or null when there is no valid session."""
    user = provider.get_user(get_session_token(request))
    resp = JSONResponse(content=ProfileResponse(user=user).model_dump())
    resp.headers["Cache-Control"] = "no-store"
    return resp


@router.delete(
    "/auth/logout",
    response_model=LogoutResponse,
    responses={400: {"model": AuthErrorResponse}},
)
@limiter.limit(auth_rate_limit)
def logout(
    request: Request,
    provider: AuthProviderClient = Depends(get_auth_provider),
) -> JSONResponse:
    """End the provider session and clear the session cookie."""
    try:
        provider.sign_out(get_session_token(request))
    except AuthProviderError as e:
        resp = JSONResponse(status_code=400, content=AuthErrorResponse(error=e.message).model_dump())
        resp.headers["Cache-Control"] = "no-store"
        return resp

    resp = JSONResponse(content=LogoutResponse(success=True).model_dump())
    resp.delete_cookie(get_settings().session_cookie_name)
    resp.headers["Cache-Control"] = "no-store"
    return resp
