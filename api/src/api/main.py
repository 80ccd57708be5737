"""FastAPI application factory."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from stardate.config import get_settings

from api.routers import health, public

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(title="Stardate API", version="0.1.0")
    settings = get_settings()
    if not settings.data_dir:
        logger.debug("DATA_DIR not set; serving packaged almanac data")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.site_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(health.router, tags=["health"])
    app.include_router(public.router, prefix="/v1", tags=["public"])
    return app


app = create_app()
