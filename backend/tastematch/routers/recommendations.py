"""Recommendation endpoints."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from tastematch.config import Settings
from tastematch.dependencies import get_app_settings, get_current_user_id, get_engine
from tastematch.models import Artist, ArtistMatch, Track, TrackMatch
from tastematch.services.matching import (
    RECOMMENDATION_LIMIT,
    SIMILAR_ARTISTS_LIMIT,
    MatchingEngine,
)

logger = logging.getLogger(__name__)

router = APIRouter()


class TrackRecommendationResponse(Track):
    """Track annotated with how well it matches the listener's profile."""
    match_percentage: int


class ArtistRecommendationResponse(Artist):
    """Artist annotated with its similarity to the target artist."""
    similarity_percentage: int


def track_recommendation_payload(match: TrackMatch) -> dict:
    return {**match.track.model_dump(), "match_percentage": match.match_percentage}


def artist_recommendation_payload(match: ArtistMatch) -> dict:
    return {
        **match.artist.model_dump(),
        "similarity_percentage": match.similarity_percentage,
    }


@router.get("/recommendations", response_model=List[TrackRecommendationResponse])
async def get_recommendations(
    limit: int = Query(RECOMMENDATION_LIMIT, ge=1, le=50),
    user_id: int = Depends(get_current_user_id),
    engine: MatchingEngine = Depends(get_engine),
):
    """Tracks matching the current user's taste profile, best first."""
    matches = engine.recommendations_for_user(user_id, limit=limit)
    logger.debug("Returning %d recommendations for user %d", len(matches), user_id)
    return [track_recommendation_payload(m) for m in matches]


@router.get(
    "/artist-recommendations",
    response_model=List[ArtistRecommendationResponse],
)
async def get_artist_recommendations(
    artist_id: Optional[int] = Query(None, description="Target artist; defaults to the featured artist"),
    limit: int = Query(SIMILAR_ARTISTS_LIMIT, ge=1, le=20),
    engine: MatchingEngine = Depends(get_engine),
    settings: Settings = Depends(get_app_settings),
):
    """Artists similar to the given (or featured) artist."""
    target_id = artist_id if artist_id is not None else settings.featured_artist_id
    matches = engine.artist_recommendations(target_id, limit=limit)
    return [artist_recommendation_payload(m) for m in matches]
