"""Catalog search endpoint."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from tastematch.dependencies import get_store
from tastematch.models import Artist, Track
from tastematch.services.catalog import CatalogStore

router = APIRouter()


class SearchResponse(BaseModel):
    """Search results; a section is omitted when its type wasn't requested."""
    tracks: Optional[List[Track]] = None
    artists: Optional[List[Artist]] = None


@router.get("", response_model=SearchResponse, response_model_exclude_none=True)
async def search(
    q: str = Query("", description="Search query"),
    type: str = Query("all", pattern="^(all|tracks|artists)$"),
    store: CatalogStore = Depends(get_store),
):
    """Search tracks (title, artist, album) and/or artists (name)."""
    results = SearchResponse()
    if type in ("all", "tracks"):
        results.tracks = store.search_tracks(q)
    if type in ("all", "artists"):
        results.artists = store.search_artists(q)
    return results
