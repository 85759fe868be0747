"""FastAPI application factory.

Routers
-------
All endpoint groups are mounted under their respective path prefix:

    /api       on-demand page scraping (``GET /api/getFullPage``)

Each request launches its own headless browser and tears it down before the
response is sent; the app itself holds no browser state.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.config import settings

from backend.api.routers import scrape as scrape_router


def configure_logging() -> None:
    """Apply ``settings.log_level`` to the root logger (no-op if already configured)."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    configure_logging()

    app = FastAPI(
        title="Full Page Scraper API",
        description=(
            "Renders pages of the trusted origin in a headless browser and "
            "returns every text block longer than 40 characters."
        ),
        version="0.1.0",
    )

    # Allow browser frontends on any origin (tighten for production).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(scrape_router.router, prefix="/api", tags=["scrape"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn backend.api.app:app --reload
app = create_app()
