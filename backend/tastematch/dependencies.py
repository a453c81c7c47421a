"""Store construction and request dependencies.

The store and settings are kept on ``app.state``; handlers receive them
through :func:`get_store` and :func:`get_app_settings` so tests can swap either
with ``app.dependency_overrides``.
"""

import logging

from fastapi import Depends, Request

from tastematch.config import Settings, get_settings
from tastematch.services.catalog import CatalogStore
from tastematch.services.matching import MatchingEngine
from tastematch.services.seed import seed_demo_catalog

logger = logging.getLogger(__name__)


def init_store(settings: Settings) -> CatalogStore:
    """Create the process-wide store, seeding demo data when enabled."""
    store = CatalogStore()
    if settings.seed_demo_data:
        seed_demo_catalog(store)
    else:
        logger.info("Starting with an empty catalog")
    return store


def get_app_settings(request: Request) -> Settings:
    """Get the settings the application was created with."""
    return getattr(request.app.state, "settings", None) or get_settings()


def get_store(request: Request) -> CatalogStore:
    """Get the application's catalog store."""
    return request.app.state.store


def get_engine(store: CatalogStore = Depends(get_store)) -> MatchingEngine:
    """Get a matching engine bound to the application's store."""
    return MatchingEngine(store)


def get_current_user_id(settings: Settings = Depends(get_app_settings)) -> int:
    """Single-user mode: every request acts as the configured default user."""
    return settings.default_user_id
