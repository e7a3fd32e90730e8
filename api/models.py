"""
API response models for the site's JSON endpoints.

These Pydantic v2 models define the HTTP transport contract for the API layer.
They are intentionally separate from the dataclasses in core/models.py, which
own the internal domain representation. Route handlers map between the two.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field

from core.models import Card

# ---------------------------------------------------------------------------
# Cards
# ---------------------------------------------------------------------------


class CardResponse(BaseModel):
    id: str
    title: str
    description: str
    author: str
    link: str
    # camelCase on the wire, matching the front end's Card shape
    image_url: str = Field(serialization_alias="imageUrl")

    @classmethod
    def from_domain(cls, card: Card) -> "CardResponse":
        return cls(
            id=card.id,
            title=card.title,
            description=card.description,
            author=card.author,
            link=card.link,
            image_url=card.image_url,
        )


class CardListResponse(BaseModel):
    cards: list[CardResponse]
    count: int


# ---------------------------------------------------------------------------
# Auth passthrough
#
# The shapes here are fixed by the front end: {"user": ...}, {"success": true}
# and {"error": "..."} -- note the error is a bare string, not ErrorDetail.
# ---------------------------------------------------------------------------


class ProfileResponse(BaseModel):
    # Provider-defined user object, passed through untouched.
    user: Optional[dict[str, Any]] = None


class LogoutResponse(BaseModel):
    success: bool = True


class AuthErrorResponse(BaseModel):
    error: str


# ---------------------------------------------------------------------------
# Shared
# ---------------------------------------------------------------------------


class ErrorDetail(BaseModel):
    code: str
    message: str
    detail: Optional[str] = None


class ErrorResponse(BaseModel):
    error: ErrorDetail


class HealthResponse(BaseModel):
    status: str = "healthy"
    version: str
