"""
web/routes.py -- Jinja2 template routes for the landing page.

These routes serve server-rendered HTML. They share app.state with the API
routes (same card cache and Notion client) but return HTML instead of JSON.

Routes:
  GET  /   -- landing page: headline, card carousel, logo cloud
"""

import logging
from pathlib import Path
from urllib.parse import urlparse

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from cache.store import cached_cards
from core.config import get_settings

logger = logging.getLogger("deta.web")

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
router = APIRouter()


def is_http_url(value: str) -> bool:
    """True only for absolute http(s) URLs. Cards with any other link render unlinked."""
    if not value:
        return False
    parsed = urlparse(value.strip())
    return parsed.scheme.lower() in ("http", "https") and bool(parsed.netloc)


templates.env.tests["http_url"] = is_http_url

# (src, alt, css height class)
LOGOS: list[tuple[str, str, str]] = [
    ("https://html.tailus.io/blocks/customers/nvidia.svg", "Nvidia Logo", "h-4"),
    ("https://cdn.worldvectorlogo.com/logos/nextjs-13.svg", "nextjs Logo", "h-4"),
    ("https://html.tailus.io/blocks/customers/github.svg", "GitHub Logo", "h-4"),
    ("https://svgmix.com/uploads/e11fe3-react.svg", "react Logo", "h-6"),
    ("https://html.tailus.io/blocks/customers/vercel.svg", "Vercel Logo", "h-4"),
    ("https://html.tailus.io/blocks/customers/laravel.svg", "Laravel Logo", "h-3"),
    ("https://library.shadcnblocks.com/images/block/logos/shadcn-ui-wordmark.svg", "shadcn Logo", "h-6"),
]


@router.get("/", response_class=HTMLResponse)
def landing(request: Request) -> HTMLResponse:
    state = request.app.state
    cards = cached_cards(state.card_cache, state.content_store, state.notion_client)
    if not cards:
        logger.info("Rendering landing page with no cards")
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "site_title": get_settings().site_title,
            "cards": cards,
            "logos": LOGOS,
        },
    )
