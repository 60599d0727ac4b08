from __future__ import annotations

import logging
import os

from fastapi import FastAPI, HTTPException, Request
from pydantic import ValidationError
from starlette.middleware.sessions import SessionMiddleware

from .catalog.data_store import get_attraction, get_catalog
from .catalog.models import Attraction, UnknownAttractionError
from .presentation.models import AttractionRow
from .presentation.rows import present_row
from .state.models import (
    AppState,
    CategoryRequest,
    FavoritesOnlyRequest,
    ScreenSnapshot,
    SearchRequest,
)
from .state.session import ExplorerSession

logger = logging.getLogger(__name__)

_STATE_KEY = "explorer_state"

app = FastAPI(title="Attraction Explorer API", version="1.0.0")
app.add_middleware(
    SessionMiddleware,
    secret_key=os.environ.get("SESSION_SECRET", "attraction-explorer-secret-change-in-production"),
)


def _load_session(request: Request) -> ExplorerSession:
    """Rebuild the caller's explorer state from the session cookie."""
    raw_state = request.session.get(_STATE_KEY)
    try:
        state = AppState.model_validate(raw_state) if raw_state else AppState()
    except ValidationError:
        logger.warning("Discarding unreadable explorer state from session", exc_info=True)
        state = AppState()
    return ExplorerSession(get_catalog(), state)


def _save_session(request: Request, session: ExplorerSession) -> ScreenSnapshot:
    request.session[_STATE_KEY] = session.state.to_session()
    return session.snapshot


def _require_attraction(attraction_id: str) -> Attraction:
    try:
        return get_attraction(attraction_id)
    except UnknownAttractionError:
        raise HTTPException(status_code=404, detail=f"Unknown attraction: {attraction_id}") from None


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    catalog = get_catalog()
    categories = sorted({a.category.value for a in catalog})
    cities = sorted({a.city.value for a in catalog})
    return {"categories": categories, "cities": cities, "total_attractions": len(catalog)}


# ── Attraction list ──────────────────────────────────────────────────────


@app.get("/attractions", response_model=ScreenSnapshot)
def attractions(request: Request) -> ScreenSnapshot:
    return _save_session(request, _load_session(request))


@app.get("/attractions/{attraction_id}", response_model=AttractionRow)
def attraction_detail(attraction_id: str, request: Request) -> AttractionRow:
    attraction = _require_attraction(attraction_id)
    session = _load_session(request)
    return present_row(attraction, session.state.favorites)


# ── Intents ──────────────────────────────────────────────────────────────


@app.put("/filters/category", response_model=ScreenSnapshot)
def select_category(body: CategoryRequest, request: Request) -> ScreenSnapshot:
    session = _load_session(request)
    session.select_category(body.category)
    return _save_session(request, session)


@app.put("/filters/search", response_model=ScreenSnapshot)
def set_search_text(body: SearchRequest, request: Request) -> ScreenSnapshot:
    session = _load_session(request)
    session.set_search_text(body.text)
    return _save_session(request, session)


@app.put("/filters/favorites-only", response_model=ScreenSnapshot)
def set_show_favorites_only(body: FavoritesOnlyRequest, request: Request) -> ScreenSnapshot:
    session = _load_session(request)
    session.set_show_favorites_only(body.enabled)
    return _save_session(request, session)


@app.post("/favorites/{attraction_id}/toggle", response_model=ScreenSnapshot)
def toggle_favorite(attraction_id: str, request: Request) -> ScreenSnapshot:
    _require_attraction(attraction_id)
    session = _load_session(request)
    session.toggle_favorite(attraction_id)
    return _save_session(request, session)


@app.post("/state/reset", response_model=ScreenSnapshot)
def reset_state(request: Request) -> ScreenSnapshot:
    session = _load_session(request)
    session.reset()
    return _save_session(request, session)
