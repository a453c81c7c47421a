"""Playlist endpoints."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from tastematch.dependencies import get_current_user_id, get_store
from tastematch.exceptions import PermissionDeniedError
from tastematch.models import Playlist, PlaylistSummary, Track
from tastematch.services.catalog import CatalogStore

logger = logging.getLogger(__name__)

router = APIRouter()


class PlaylistCreateRequest(BaseModel):
    """New playlist payload."""
    name: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    image_url: Optional[str] = None


class PlaylistTrackRequest(BaseModel):
    """Track to add to a playlist."""
    track_id: int


class PlaylistDetailResponse(PlaylistSummary):
    """Playlist with its tracks."""
    tracks: List[Track] = Field(default_factory=list)


def _require_owner(playlist: Playlist, user_id: int) -> None:
    if playlist.user_id != user_id:
        logger.info(
            "User %d denied modifying playlist %d owned by %d",
            user_id,
            playlist.id,
            playlist.user_id,
        )
        raise PermissionDeniedError("You don't have permission to modify this playlist")


@router.post("", response_model=PlaylistSummary, status_code=status.HTTP_201_CREATED)
async def create_playlist(
    request: PlaylistCreateRequest,
    user_id: int = Depends(get_current_user_id),
    store: CatalogStore = Depends(get_store),
):
    """Create a playlist owned by the current user."""
    playlist = store.create_playlist(
        user_id,
        request.name,
        description=request.description,
        image_url=request.image_url,
    )
    return store.get_playlist_summary(playlist.id)


@router.get("/{playlist_id}", response_model=PlaylistDetailResponse)
async def get_playlist(
    playlist_id: int,
    store: CatalogStore = Depends(get_store),
):
    """Get a playlist and its tracks."""
    summary = store.get_playlist_summary(playlist_id)
    return {
        **summary.model_dump(),
        "tracks": store.get_playlist_tracks(playlist_id),
    }


@router.post("/{playlist_id}/tracks")
async def add_track_to_playlist(
    playlist_id: int,
    request: PlaylistTrackRequest,
    user_id: int = Depends(get_current_user_id),
    store: CatalogStore = Depends(get_store),
):
    """Add a track to one of the current user's playlists."""
    _require_owner(store.get_playlist(playlist_id), user_id)
    added = store.add_track_to_playlist(playlist_id, request.track_id)
    return {"success": True, "added": added}


@router.delete("/{playlist_id}/tracks/{track_id}")
async def remove_track_from_playlist(
    playlist_id: int,
    track_id: int,
    user_id: int = Depends(get_current_user_id),
    store: CatalogStore = Depends(get_store),
):
    """Remove a track from one of the current user's playlists."""
    _require_owner(store.get_playlist(playlist_id), user_id)
    removed = store.remove_track_from_playlist(playlist_id, track_id)
    return {"success": True, "removed": removed}
