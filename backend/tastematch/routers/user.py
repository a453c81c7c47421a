"""Current-user endpoints: profile, preferences, likes and playlists."""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends

from tastematch.dependencies import get_current_user_id, get_store
from tastematch.models import PlaylistSummary, PreferenceProfile, Track, User
from tastematch.services.catalog import CatalogStore

router = APIRouter()


class CurrentUserResponse(User):
    """User with their playlists."""
    playlists: List[PlaylistSummary] = []


@router.get("/current", response_model=CurrentUserResponse)
async def get_current_user(
    user_id: int = Depends(get_current_user_id),
    store: CatalogStore = Depends(get_store),
):
    """Get the current user with playlist summaries."""
    user = store.get_user(user_id)
    return {**user.model_dump(), "playlists": store.list_user_playlists(user_id)}


@router.get("/preferences", response_model=PreferenceProfile)
async def get_preferences(
    user_id: int = Depends(get_current_user_id),
    store: CatalogStore = Depends(get_store),
):
    """Get the current user's taste profile."""
    return store.get_preferences(user_id)


@router.patch("/preferences", response_model=PreferenceProfile)
async def update_preferences(
    changes: Dict[str, Any] = Body(...),
    user_id: int = Depends(get_current_user_id),
    store: CatalogStore = Depends(get_store),
):
    """Partially update the taste profile; omitted fields keep their values."""
    return store.update_preferences(user_id, changes)


@router.get("/liked-tracks", response_model=List[Track])
async def get_liked_tracks(
    user_id: int = Depends(get_current_user_id),
    store: CatalogStore = Depends(get_store),
):
    """Tracks the current user has liked."""
    return store.list_liked_tracks(user_id)


@router.get("/playlists", response_model=List[PlaylistSummary])
async def get_playlists(
    user_id: int = Depends(get_current_user_id),
    store: CatalogStore = Depends(get_store),
):
    """The current user's playlists with track counts."""
    return store.list_user_playlists(user_id)
