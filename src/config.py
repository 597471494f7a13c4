"""
Configuration settings for the application.
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

from src.services.errors import ConfigurationError

load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    # Environment
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")

    # Ecwid REST API
    ECWID_API_URL: str = os.getenv("ECWID_API_URL", "https://app.ecwid.com/api/v3")
    ECWID_TIMEOUT_SECONDS: float = float(os.getenv("ECWID_TIMEOUT_SECONDS", "10"))

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.
        """
        return self.ENVIRONMENT.lower() == "production"

    def __init__(self):
        self.log_level = os.getenv("LOG_LEVEL", "INFO")
        logging.basicConfig(level=self.log_level)
        self.logger = logging.getLogger(__name__)

        self.logger.debug(
            f"Config initialized with environment={self.ENVIRONMENT}, "
            f"log_level={self.log_level}"
        )


# Create a global settings instance for import
settings = Settings()


class CatalogConfig(BaseModel):
    """Store credentials and per-request options snapshotted from the environment."""

    model_config = ConfigDict(frozen=True)

    store_id: str | None = None
    token: str | None = None
    allowed_origin: str | None = None
    webhook_secret: str | None = None
    api_url: str = "https://app.ecwid.com/api/v3"
    timeout_seconds: float = 10.0

    @classmethod
    def from_env(cls) -> CatalogConfig:
        return cls(
            store_id=os.getenv("ECWID_STORE_ID") or None,
            token=os.getenv("ECWID_TOKEN") or None,
            allowed_origin=os.getenv("ALLOWED_ORIGIN") or None,
            webhook_secret=os.getenv("ECWID_WEBHOOK_SECRET") or None,
            api_url=settings.ECWID_API_URL.rstrip("/"),
            timeout_seconds=settings.ECWID_TIMEOUT_SECONDS,
        )

    @property
    def credentials_configured(self) -> bool:
        """Return True when both the store id and the API token are set."""
        return bool(self.store_id and self.token)

    @property
    def products_url(self) -> str:
        return f"{self.api_url}/{self.store_id}/products"

    def require_credentials(self) -> None:
        if not self.credentials_configured:
            raise ConfigurationError("Server not configured")


def get_catalog_config() -> CatalogConfig:
    """FastAPI dependency returning a fresh configuration snapshot."""

    return CatalogConfig.from_env()
