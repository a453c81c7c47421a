"""Track model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from tastematch.models.common import Attribute, Genres


class Track(BaseModel):
    """Catalog track with pre-computed taste attributes."""

    model_config = ConfigDict(frozen=True)

    id: int

    # Basic info
    title: str
    artist: str
    album: str
    cover_url: str
    audio_url: str
    duration: int = Field(ge=0)  # seconds

    # Taste attributes (1-10)
    energy: Attribute = 5
    acoustics: Attribute = 5
    popularity: Attribute = 5
    mood: Attribute = 5
    instrumental: Attribute = 5
    experimental: Attribute = 5

    genres: Genres = ()

    date_added: datetime = Field(default_factory=datetime.utcnow)

    def __repr__(self) -> str:
        return f"<Track(id={self.id}, title='{self.title}')>"
