"""Matching engine: scores tracks against taste profiles and artists against each other."""

import logging
import math
from typing import Dict, Iterable, List, Mapping

from tastematch.models import (
    Artist,
    ArtistMatch,
    PreferenceProfile,
    Track,
    TrackMatch,
)
from tastematch.models.common import ATTRIBUTE_MAX, ATTRIBUTE_MIN, ATTRIBUTE_NAMES
from tastematch.services.catalog import CatalogStore

logger = logging.getLogger(__name__)

# Per-attribute weights for the track match score (sum to 1.0)
ATTRIBUTE_WEIGHTS: Dict[str, float] = dict(
    zip(ATTRIBUTE_NAMES, (0.20, 0.15, 0.10, 0.20, 0.15, 0.20))
)

# Blend of attribute closeness vs genre overlap for tracks
TRACK_ATTRIBUTE_WEIGHT = 0.7
TRACK_GENRE_WEIGHT = 0.3

# Blend of genre overlap vs popularity closeness for artists
ARTIST_GENRE_WEIGHT = 0.7
ARTIST_POPULARITY_WEIGHT = 0.3

MAX_ATTRIBUTE_DISTANCE = ATTRIBUTE_MAX - ATTRIBUTE_MIN
MAX_POPULARITY_DISTANCE = 100

RECOMMENDATION_LIMIT = 8
RECOMMENDATION_MIN_PERCENTAGE = 50
SIMILAR_ARTISTS_LIMIT = 4


def to_percentage(score: float) -> int:
    """Round a 0-1 score to a whole percentage, halves rounding up."""
    return int(math.floor(score * 100 + 0.5))


def genre_overlap(genres_a: Iterable[str], genres_b: Iterable[str]) -> float:
    """Jaccard index of two genre collections, compared case-insensitively.

    Returns 0.0 when either side is empty.
    """
    a = {g.lower() for g in genres_a}
    b = {g.lower() for g in genres_b}
    if not a or not b:
        return 0.0
    return len(a & b) / len(a | b)


def attribute_closeness(track_value: int, preferred_value: int) -> float:
    """1.0 for an exact match down to 0.0 at opposite ends of the 1-10 scale."""
    return 1.0 - abs(track_value - preferred_value) / MAX_ATTRIBUTE_DISTANCE


def attribute_score(
    track: Track,
    preferences: PreferenceProfile,
    weights: Mapping[str, float] = ATTRIBUTE_WEIGHTS,
) -> float:
    """Weighted mean closeness over the six taste attributes."""
    weighted_sum = 0.0
    total_weight = 0.0
    for name, weight in weights.items():
        weighted_sum += weight * attribute_closeness(
            getattr(track, name), getattr(preferences, name)
        )
        total_weight += weight
    if total_weight <= 0:
        return 0.0
    return weighted_sum / total_weight


def track_match_score(track: Track, preferences: PreferenceProfile) -> float:
    """How well a track fits a preference profile, in [0, 1]."""
    score = (
        TRACK_ATTRIBUTE_WEIGHT * attribute_score(track, preferences)
        + TRACK_GENRE_WEIGHT * genre_overlap(track.genres, preferences.genres)
    )
    return max(0.0, min(1.0, score))


def artist_similarity(artist_a: Artist, artist_b: Artist) -> float:
    """Similarity of two artists from shared genres and popularity, in [0, 1]."""
    popularity_similarity = (
        1.0 - abs(artist_a.popularity - artist_b.popularity) / MAX_POPULARITY_DISTANCE
    )
    return (
        ARTIST_GENRE_WEIGHT * genre_overlap(artist_a.genres, artist_b.genres)
        + ARTIST_POPULARITY_WEIGHT * popularity_similarity
    )


class MatchingEngine:
    """Ranks catalog entries against a profile or an artist.

    Holds a reference to the store and only ever reads from it.
    """

    def __init__(self, store: CatalogStore) -> None:
        self.store = store

    def track_recommendations(
        self,
        preferences: PreferenceProfile,
        limit: int = RECOMMENDATION_LIMIT,
        min_percentage: int = RECOMMENDATION_MIN_PERCENTAGE,
    ) -> List[TrackMatch]:
        """Best-matching tracks for a profile.

        Only tracks scoring above ``min_percentage`` are kept. Results are
        sorted by score, highest first; equal scores keep catalog order.
        """
        matches = []
        for track in self.store.list_tracks():
            score = track_match_score(track, preferences)
            percentage = to_percentage(score)
            if percentage > min_percentage:
                matches.append(
                    TrackMatch(track=track, score=score, match_percentage=percentage)
                )

        matches.sort(key=lambda m: m.score, reverse=True)
        logger.debug(
            "Scored catalog for recommendations; %d above %d%%",
            len(matches),
            min_percentage,
        )
        return matches[:limit]

    def recommendations_for_user(
        self,
        user_id: int,
        limit: int = RECOMMENDATION_LIMIT,
    ) -> List[TrackMatch]:
        """Track recommendations from a user's stored profile."""
        preferences = self.store.get_preferences(user_id)
        return self.track_recommendations(preferences, limit=limit)

    def artist_recommendations(
        self,
        artist_id: int,
        limit: int = SIMILAR_ARTISTS_LIMIT,
    ) -> List[ArtistMatch]:
        """Artists most similar to ``artist_id``, excluding the artist itself.

        Raises NotFoundError when the artist is unknown.
        """
        target = self.store.get_artist(artist_id)

        matches = []
        for artist in self.store.list_artists():
            if artist.id == target.id:
                continue
            score = artist_similarity(target, artist)
            matches.append(
                ArtistMatch(
                    artist=artist,
                    score=score,
                    similarity_percentage=to_percentage(score),
                )
            )

        matches.sort(key=lambda m: m.similarity_percentage, reverse=True)
        return matches[:limit]
