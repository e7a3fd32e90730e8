"""
api/routes/cards.py -- JSON view of the landing page cards.

  GET /api/cards  -- {"cards": [...], "count": N}

Served from the same cache as the landing page, so polling this endpoint does
not multiply Notion traffic. Never fails: a Notion outage is an empty list.
"""

from fastapi import APIRouter, Request

from api.models import CardListResponse, CardResponse
from cache.store import cached_cards

router = APIRouter()


@router.get("/cards", response_model=CardListResponse)
def list_cards(request: Request) -> CardListResponse:
    state = request.app.state
    cards = cached_cards(state.card_cache, state.content_store, state.notion_client)
    return CardListResponse(cards=[CardResponse.from_domain(c) for c in cards], count=len(cards))
