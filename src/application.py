"""FastAPI application factory and bootstrap helpers."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.api.routes import include_api_routes
from src.config import CatalogConfig, settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events."""
    if not CatalogConfig.from_env().credentials_configured:
        logger.warning(
            "ECWID_STORE_ID/ECWID_TOKEN are not set; "
            "quote and webhook endpoints will answer 500"
        )
    logger.info("Custom quote service started (environment=%s)", settings.ENVIRONMENT)

    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Ecwid Custom Quote",
        description="Prices custom-cut sheets and manages one-off Ecwid products",
        version="1.0.0",
        lifespan=lifespan,
    )

    include_api_routes(app)

    return app
