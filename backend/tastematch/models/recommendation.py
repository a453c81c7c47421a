"""Ranked results produced by the matching engine.

These wrap catalog entities with a display percentage; the wrapped
entities are never modified.
"""

from pydantic import BaseModel, ConfigDict

from tastematch.models.artist import Artist
from tastematch.models.track import Track


class TrackMatch(BaseModel):
    """A track scored against a preference profile."""

    model_config = ConfigDict(frozen=True)

    track: Track
    score: float
    match_percentage: int


class ArtistMatch(BaseModel):
    """An artist scored against a target artist."""

    model_config = ConfigDict(frozen=True)

    artist: Artist
    score: float
    similarity_percentage: int
