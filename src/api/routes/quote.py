"""Routes that price a custom sheet and publish it to the catalog."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from src.config import CatalogConfig
from src.models.quote import MISSING_FIELD_MESSAGES, QuoteRequest, QuoteResponse
from src.services.clients.catalog_client import (
    CatalogConfigDependency,
    CatalogDependency,
)
from src.services.errors import CatalogServiceError, InternalError, ValidationError
from src.services.pricing import build_product

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/quote", tags=["quote"])


def cors_headers(config: CatalogConfig, origin: str | None) -> dict[str, str]:
    """CORS headers: configured origin, else the caller's origin, else '*'."""

    return {
        "Access-Control-Allow-Origin": config.allowed_origin or origin or "*",
        "Access-Control-Allow-Methods": "POST,OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type",
        "Vary": "Origin",
    }


def parse_quote_request(body: object) -> QuoteRequest:
    """Validate the raw body, surfacing the first violated constraint."""

    try:
        return QuoteRequest.model_validate(body)
    except PydanticValidationError as exc:
        first_error = exc.errors()[0]
        message = first_error["msg"]
        if first_error["type"] == "missing":
            field = first_error["loc"][0] if first_error["loc"] else None
            message = MISSING_FIELD_MESSAGES.get(field, message)
        raise ValidationError(message) from exc


@router.options("", summary="CORS pre-flight for the quote endpoint")
async def quote_preflight(request: Request, config: CatalogConfigDependency) -> Response:
    return Response(
        status_code=status.HTTP_204_NO_CONTENT,
        headers=cors_headers(config, request.headers.get("origin")),
    )


@router.post(
    "",
    response_model=QuoteResponse,
    summary="Price a custom sheet and create a one-off catalog product",
)
async def create_quote(
    request: Request,
    config: CatalogConfigDependency,
    catalog: CatalogDependency,
) -> JSONResponse:
    headers = cors_headers(config, request.headers.get("origin"))

    try:
        config.require_credentials()
        quote_request = parse_quote_request(await request.json())
        quote, product = build_product(quote_request)
        created = await catalog.create_product(product)
    except CatalogServiceError as exc:
        logger.info(
            "Quote request failed",
            extra={"status": exc.status_code, "error": exc.message},
        )
        return JSONResponse(
            {"error": exc.message}, status_code=exc.status_code, headers=headers
        )
    except Exception as exc:  # pylint: disable=broad-exception-caught
        logger.exception("Unexpected error while creating quote product")
        error = InternalError.from_exception(exc)
        return JSONResponse(
            {"error": error.message}, status_code=error.status_code, headers=headers
        )

    logger.info(
        "Quote product created",
        extra={"sku": product.sku, "price": quote.final, "area": quote.area},
    )
    response = QuoteResponse(
        product_id=created.id,
        price=quote.final,
        area=quote.area,
        sku=product.sku,
    )
    return JSONResponse(response.model_dump(by_alias=True), headers=headers)
