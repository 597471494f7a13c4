"""Catalog product payloads exchanged with the Ecwid REST API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

MARKER_ATTRIBUTE = "customPriceOneOff"


class ProductAttribute(BaseModel):
    """Name/value attribute attached to a catalog product."""

    name: str
    value: str


class CatalogProductCreate(BaseModel):
    """Body sent to POST /products for a one-off custom product."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    price: float
    sku: str
    description: str
    enabled: bool = True
    show_on_frontpage: int = Field(0, alias="showOnFrontpage")
    track_quantity: bool = Field(False, alias="trackQuantity")
    attributes: list[ProductAttribute] = Field(
        default_factory=lambda: [ProductAttribute(name=MARKER_ATTRIBUTE, value="true")]
    )


class CreatedProduct(BaseModel):
    """Subset of the create-product response we rely on."""

    id: int
