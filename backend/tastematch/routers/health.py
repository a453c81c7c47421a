"""Health check endpoints."""

from fastapi import APIRouter, Depends

from tastematch.config import Settings
from tastematch.dependencies import get_app_settings, get_store
from tastematch.services.catalog import CatalogStore

router = APIRouter()


@router.get("/health")
async def health_check(settings: Settings = Depends(get_app_settings)):
    """Basic health check."""
    return {"status": "healthy", "version": settings.app_version}


@router.get("/health/ready")
async def readiness_check(store: CatalogStore = Depends(get_store)):
    """Readiness check reporting catalog size."""
    tracks = len(store.list_tracks())
    artists = len(store.list_artists())
    return {
        "status": "ready" if tracks else "empty",
        "catalog": {"tracks": tracks, "artists": artists},
    }
