"""Preference profile models for storing a listener's taste."""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from tastematch.models.common import Attribute, Genres


class PreferenceProfile(BaseModel):
    """Taste profile: six 1-10 sliders plus preferred genres.

    Each user owns exactly one profile. Updates replace the stored instance
    as a whole, so the model itself is frozen.
    """

    model_config = ConfigDict(frozen=True)

    energy: Attribute = 5
    acoustics: Attribute = 5
    popularity: Attribute = 5
    mood: Attribute = 5
    instrumental: Attribute = 5
    experimental: Attribute = 5
    genres: Genres = ()


class PreferenceUpdate(BaseModel):
    """Partial preference update. Only fields that were sent are applied."""

    model_config = ConfigDict(extra="forbid")

    energy: Optional[Attribute] = None
    acoustics: Optional[Attribute] = None
    popularity: Optional[Attribute] = None
    mood: Optional[Attribute] = None
    instrumental: Optional[Attribute] = None
    experimental: Optional[Attribute] = None
    genres: Optional[Genres] = None

    def changes(self) -> dict:
        """Fields explicitly set on this update, excluding explicit nulls."""
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }
