"""Catalog client abstractions and the Ecwid REST implementation."""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from typing import Annotated

import httpx
from fastapi import Depends

from src.config import CatalogConfig, get_catalog_config
from src.models.catalog import CatalogProductCreate, CreatedProduct
from src.services.errors import UpstreamError, ValidationError

logger = logging.getLogger(__name__)

PRODUCT_ID_PATTERN = re.compile(r"[0-9]+")


class CatalogClient(ABC):
    """Abstract interface over the remote product catalog."""

    @abstractmethod
    async def create_product(self, product: CatalogProductCreate) -> CreatedProduct:
        """Create the product and return the server-assigned identifier."""

    @abstractmethod
    async def delete_product(self, product_id: str) -> None:
        """Delete the product with the given identifier."""


class EcwidCatalogClient(CatalogClient):
    """Catalog client backed by the Ecwid REST API v3."""

    def __init__(
        self,
        config: CatalogConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            headers={
                "Authorization": f"Bearer {self._config.token}",
                "Accept": "application/json",
            },
            timeout=self._config.timeout_seconds,
            transport=self._transport,
        )

    async def create_product(self, product: CatalogProductCreate) -> CreatedProduct:
        async with self._client() as client:
            response = await client.post(
                self._config.products_url,
                json=product.model_dump(by_alias=True),
            )

        if not response.is_success:
            logger.warning(
                "Catalog rejected product creation",
                extra={"sku": product.sku, "status": response.status_code},
            )
            raise UpstreamError("Create", response.status_code, response.text)

        created = CreatedProduct.model_validate(response.json())
        logger.info("Created catalog product %s (sku=%s)", created.id, product.sku)
        return created

    async def delete_product(self, product_id: str) -> None:
        # Ecwid product ids are numeric; anything else could leave /products.
        if not PRODUCT_ID_PATTERN.fullmatch(product_id):
            raise ValidationError(f"Invalid product id: {product_id!r}")

        async with self._client() as client:
            response = await client.delete(f"{self._config.products_url}/{product_id}")

        if not response.is_success:
            raise UpstreamError("Delete", response.status_code, response.text)

        logger.info("Deleted catalog product %s", product_id)


def get_catalog_client(
    config: Annotated[CatalogConfig, Depends(get_catalog_config)],
) -> CatalogClient:
    """FastAPI dependency building a catalog client for the current request."""

    return EcwidCatalogClient(config)


CatalogConfigDependency = Annotated[CatalogConfig, Depends(get_catalog_config)]
CatalogDependency = Annotated[CatalogClient, Depends(get_catalog_client)]
