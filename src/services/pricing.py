"""Price calculation and catalog naming for custom-length sheets."""

from __future__ import annotations

import time
from decimal import ROUND_HALF_UP, Decimal

from src.models.catalog import CatalogProductCreate
from src.models.quote import QuoteRequest, QuoteResult

WIDTH_M = Decimal("1.21")
WIDTH_MM = 1210
BASE_RATE = Decimal("22")
SURCHARGE_RATES: dict[str, Decimal] = {
    "0.5": Decimal("0"),
    "0.6": Decimal("3"),
    "0.7": Decimal("4"),
}

AREA = Decimal("0.001")
MONEY = Decimal("0.01")

_THICKNESS_CODES = {"0.5": "05", "0.6": "06", "0.7": "07"}


def _quantize(value: Decimal, step: Decimal) -> Decimal:
    return value.quantize(step, rounding=ROUND_HALF_UP)


def calculate(length_mm: int, thickness: str) -> QuoteResult:
    """Return the area and price breakdown for one sheet.

    Every intermediate value is rounded half-up on exact decimals, so the
    same inputs always yield the same figures.
    """

    length_m = Decimal(length_mm) / 1000
    area = _quantize(WIDTH_M * length_m, AREA)
    base = _quantize(area * BASE_RATE, MONEY)
    surcharge = _quantize(area * SURCHARGE_RATES[thickness], MONEY)
    final = _quantize(base + surcharge, MONEY)

    return QuoteResult(
        width_m=float(WIDTH_M),
        length_m=float(length_m),
        area=float(area),
        base=float(base),
        surcharge=float(surcharge),
        final=float(final),
    )


def thickness_code(thickness: str) -> str:
    """Two-digit thickness code used inside SKUs ("0.6" -> "06")."""

    code = _THICKNESS_CODES.get(thickness)
    if code is not None:
        return code
    return str(thickness).replace(".", "", 1).rjust(2, "0")


def build_sku(
    length_mm: int,
    thickness: str,
    base_sku: str | None = None,
    now_ms: int | None = None,
) -> str:
    code = thickness_code(thickness)
    if base_sku:
        return f"{base_sku}-{length_mm}-{code}"
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    return f"CUST-{now_ms}-{length_mm}-{code}"


def build_name(length_mm: int, thickness: str, base_sku: str | None = None) -> str:
    width = base_sku.replace("WIDTH-", "", 1) if base_sku else str(WIDTH_MM)
    return f"Sheet {width}mm × {length_mm}mm, {thickness}mm (custom quote)"


def build_description(result: QuoteResult) -> str:
    return (
        f"Area: {result.area} m². Base: {result.base} €. "
        f"Surcharge: {result.surcharge} €. Total: {result.final} €"
    )


def build_product(
    request: QuoteRequest,
    now_ms: int | None = None,
) -> tuple[QuoteResult, CatalogProductCreate]:
    """Price a validated request and assemble the catalog product to create."""

    result = calculate(request.length_mm, request.thickness)
    product = CatalogProductCreate(
        name=build_name(request.length_mm, request.thickness, request.base_sku),
        price=result.final,
        sku=build_sku(
            request.length_mm,
            request.thickness,
            base_sku=request.base_sku,
            now_ms=now_ms,
        ),
        description=build_description(result),
    )
    return result, product
