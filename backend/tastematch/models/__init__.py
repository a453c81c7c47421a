"""Catalog models."""

from tastematch.models.artist import Artist
from tastematch.models.playlist import LikedTrack, Playlist, PlaylistSummary
from tastematch.models.preferences import PreferenceProfile, PreferenceUpdate
from tastematch.models.recommendation import ArtistMatch, TrackMatch
from tastematch.models.track import Track
from tastematch.models.user import User

__all__ = [
    "Artist",
    "ArtistMatch",
    "LikedTrack",
    "Playlist",
    "PlaylistSummary",
    "PreferenceProfile",
    "PreferenceUpdate",
    "Track",
    "TrackMatch",
    "User",
]
