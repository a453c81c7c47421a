"""Tastematch - Main FastAPI Application."""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tastematch.config import Settings, get_settings
from tastematch.dependencies import init_store
from tastematch.exceptions import CatalogError, NotFoundError
from tastematch.routers import (
    artists,
    health,
    playlists,
    recommendations,
    search,
    tracks,
    user,
)
from tastematch.services.catalog import CatalogStore

logger = logging.getLogger(__name__)


async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    """Translate catalog errors into JSON error responses."""
    if isinstance(exc, NotFoundError):
        logger.info("%s %s: %s", request.method, request.url.path, exc.message)
    else:
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def create_app(
    store: Optional[CatalogStore] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Build the application around ``store`` (a fresh, seeded store by default)."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = FastAPI(
        title=settings.app_name,
        description="Taste-profile music matching and recommendations",
        version=settings.app_version,
    )
    app.state.settings = settings
    app.state.store = store if store is not None else init_store(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(CatalogError, catalog_error_handler)

    app.include_router(health.router, tags=["Health"])
    app.include_router(user.router, prefix="/api/user", tags=["User"])
    app.include_router(recommendations.router, prefix="/api", tags=["Recommendations"])
    app.include_router(artists.router, prefix="/api/artists", tags=["Artists"])
    app.include_router(tracks.router, prefix="/api/tracks", tags=["Tracks"])
    app.include_router(search.router, prefix="/api/search", tags=["Search"])
    app.include_router(playlists.router, prefix="/api/playlists", tags=["Playlists"])

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "description": "Taste-profile music matching and recommendations",
        }

    return app


app = create_app()
