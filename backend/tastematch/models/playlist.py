"""Playlist and liked-track models."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Playlist(BaseModel):
    """User-owned playlist. Membership is held by the store, not the model."""

    model_config = ConfigDict(frozen=True)

    id: int
    user_id: int
    name: str = Field(min_length=1)
    description: Optional[str] = None
    image_url: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.utcnow)

    def __repr__(self) -> str:
        return f"<Playlist(id={self.id}, name='{self.name}')>"


class PlaylistSummary(Playlist):
    """Playlist with its derived track count."""

    track_count: int = 0


class LikedTrack(BaseModel):
    """A user's like on a track."""

    model_config = ConfigDict(frozen=True)

    user_id: int
    track_id: int
    liked_at: datetime
