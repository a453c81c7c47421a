"""Artist model."""

from pydantic import BaseModel, ConfigDict, Field

from tastematch.models.common import Genres


class Artist(BaseModel):
    """Artist entity."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    image_url: str = ""
    genres: Genres = ()
    popularity: int = Field(default=50, ge=0, le=100)

    def __repr__(self) -> str:
        return f"<Artist(id={self.id}, name='{self.name}')>"
