"""Schemas for the custom sheet quote API."""

from __future__ import annotations

import math
import re
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

MIN_LENGTH_MM = 1000
MAX_LENGTH_MM = 12000
ALLOWED_THICKNESSES = ("0.5", "0.6", "0.7")
# ASCII word boundary: "WIDTH-1210É" passes, "WIDTH-12100" does not.
BASE_SKU_PATTERN = re.compile(r"^WIDTH-1210\b", re.ASCII)

LENGTH_MESSAGE = "Length must be 1000..12000 mm"
THICKNESS_MESSAGE = "Thickness must be 0.5/0.6/0.7"

# Messages reported when a required body field is absent, keyed by alias.
MISSING_FIELD_MESSAGES = {
    "lengthMm": LENGTH_MESSAGE,
    "thickness": THICKNESS_MESSAGE,
}

Thickness = Literal["0.5", "0.6", "0.7"]


class QuoteRequest(BaseModel):
    """Incoming payload for POST /quote."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    length_mm: int = Field(..., alias="lengthMm")
    thickness: Thickness = Field(...)
    base_sku: str | None = Field(
        None,
        alias="baseSku",
        description="Optional base SKU, e.g. WIDTH-1210",
    )

    @field_validator("length_mm", mode="before")
    @classmethod
    def _coerce_length(cls, value: Any) -> int:
        if isinstance(value, bool):
            value = int(value)
        if isinstance(value, str):
            try:
                value = float(value.strip()) if value.strip() else math.nan
            except ValueError:
                value = math.nan
        if not isinstance(value, (int, float)) or not math.isfinite(value):
            raise PydanticCustomError("length_range", LENGTH_MESSAGE)
        if not MIN_LENGTH_MM <= value <= MAX_LENGTH_MM:
            raise PydanticCustomError("length_range", LENGTH_MESSAGE)
        if value != int(value):
            raise PydanticCustomError(
                "length_whole", "Length must be a whole number of mm"
            )
        return int(value)

    @field_validator("thickness", mode="before")
    @classmethod
    def _coerce_thickness(cls, value: Any) -> str:
        thickness = str(value)
        if thickness not in ALLOWED_THICKNESSES:
            raise PydanticCustomError("thickness", THICKNESS_MESSAGE)
        return thickness

    @field_validator("base_sku", mode="before")
    @classmethod
    def _normalize_base_sku(cls, value: Any) -> str | None:
        if value is None or value == "":
            return None
        base_sku = str(value).upper()
        if not BASE_SKU_PATTERN.match(base_sku):
            raise PydanticCustomError("base_sku", "Base SKU not allowed")
        return base_sku


class QuoteResult(BaseModel):
    """Price breakdown for a single sheet cut."""

    model_config = ConfigDict(frozen=True)

    width_m: float
    length_m: float
    area: float
    base: float
    surcharge: float
    final: float


class QuoteResponse(BaseModel):
    """Response returned once the catalog product was created."""

    model_config = ConfigDict(populate_by_name=True)

    ok: Literal[True] = True
    product_id: int = Field(..., alias="productId")
    price: float
    area: float
    sku: str
