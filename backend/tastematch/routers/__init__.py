"""API routers."""

from tastematch.routers import (
    artists,
    health,
    playlists,
    recommendations,
    search,
    tracks,
    user,
)

__all__ = [
    "artists",
    "health",
    "playlists",
    "recommendations",
    "search",
    "tracks",
    "user",
]
