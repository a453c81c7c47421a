"""Track endpoints."""

import logging
from typing import List

from fastapi import APIRouter, Depends

from tastematch.dependencies import get_current_user_id, get_store
from tastematch.models import Track
from tastematch.services.catalog import CatalogStore

logger = logging.getLogger(__name__)

router = APIRouter()


class TrackDetailResponse(Track):
    """Track with the current user's like state."""
    liked: bool = False


@router.get("", response_model=List[Track])
async def list_tracks(store: CatalogStore = Depends(get_store)):
    """List all tracks in catalog order."""
    return store.list_tracks()


@router.get("/{track_id}", response_model=TrackDetailResponse)
async def get_track(
    track_id: int,
    user_id: int = Depends(get_current_user_id),
    store: CatalogStore = Depends(get_store),
):
    """Get a track by ID."""
    track = store.get_track(track_id)
    return {**track.model_dump(), "liked": store.is_track_liked(user_id, track_id)}


@router.post("/{track_id}/like")
async def like_track(
    track_id: int,
    user_id: int = Depends(get_current_user_id),
    store: CatalogStore = Depends(get_store),
):
    """Like a track. Liking an already-liked track is a no-op."""
    store.like_track(user_id, track_id)
    return {"success": True}


@router.delete("/{track_id}/like")
async def unlike_track(
    track_id: int,
    user_id: int = Depends(get_current_user_id),
    store: CatalogStore = Depends(get_store),
):
    """Remove a like. Unliking a track that isn't liked is a no-op."""
    store.unlike_track(user_id, track_id)
    return {"success": True}
