"""System-level routes such as health checks."""

from __future__ import annotations

from fastapi import APIRouter

from src.config import settings
from src.services.clients.catalog_client import CatalogConfigDependency

router = APIRouter(tags=["system"])


@router.get("/health")
async def health_check(config: CatalogConfigDependency) -> dict[str, str]:
    """Health check reporting whether catalog credentials are present."""

    return {
        "status": "healthy",
        "environment": settings.ENVIRONMENT,
        "catalog": "configured" if config.credentials_configured else "unconfigured",
    }
