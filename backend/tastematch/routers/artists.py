"""Artist endpoints."""

from typing import List

from fastapi import APIRouter, Depends, Query

from tastematch.dependencies import get_engine, get_store
from tastematch.models import Artist, Track
from tastematch.routers.recommendations import (
    ArtistRecommendationResponse,
    artist_recommendation_payload,
)
from tastematch.services.catalog import CatalogStore
from tastematch.services.matching import SIMILAR_ARTISTS_LIMIT, MatchingEngine

router = APIRouter()


@router.get("", response_model=List[Artist])
async def list_artists(
    genre: str = Query("", description="Filter by genre (case-insensitive)"),
    store: CatalogStore = Depends(get_store),
):
    """List artists in catalog order."""
    artists = store.list_artists()
    if genre:
        wanted = genre.lower()
        artists = [a for a in artists if wanted in (g.lower() for g in a.genres)]
    return artists


@router.get("/{artist_id}", response_model=Artist)
async def get_artist(
    artist_id: int,
    store: CatalogStore = Depends(get_store),
):
    """Get artist details by ID."""
    return store.get_artist(artist_id)


@router.get("/{artist_id}/top-tracks", response_model=List[Track])
async def get_artist_top_tracks(
    artist_id: int,
    store: CatalogStore = Depends(get_store),
):
    """Top tracks credited to the artist."""
    return store.get_artist_top_tracks(artist_id)


@router.get("/{artist_id}/similar", response_model=List[ArtistRecommendationResponse])
async def get_similar_artists(
    artist_id: int,
    limit: int = Query(SIMILAR_ARTISTS_LIMIT, ge=1, le=20),
    engine: MatchingEngine = Depends(get_engine),
):
    """Artists with overlapping genres and comparable popularity."""
    matches = engine.artist_recommendations(artist_id, limit=limit)
    return [artist_recommendation_payload(m) for m in matches]
