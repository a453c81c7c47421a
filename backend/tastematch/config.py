"""Application configuration settings.

Everything here is loaded from environment variables (prefixed with
``TASTEMATCH_``) or a local ``.env`` file. The catalog itself lives in
memory and is seeded at startup.
"""

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Process settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TASTEMATCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application identity
    app_name: str = "Tastematch"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Single-user mode: requests act on behalf of this user
    default_user_id: int = 1

    # Artist used by the artist recommendations endpoint when none is given
    featured_artist_id: int = 1

    # Populate the in-memory catalog with the demo data at startup
    seed_demo_data: bool = True

    cors_origins: List[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
