"""Routes receiving Ecwid order webhooks."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from src.services.clients.catalog_client import (
    CatalogConfigDependency,
    CatalogDependency,
)
from src.services.errors import CatalogServiceError
from src.services.reconciler import parse_payload, reconcile, verify_secret

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/webhooks", tags=["webhooks"])


@router.post("", summary="Delete one-off products referenced by an order event")
async def receive_webhook(
    request: Request,
    config: CatalogConfigDependency,
    catalog: CatalogDependency,
) -> JSONResponse:
    """Always answers 200 once authorized; per-product failures are reported."""

    try:
        config.require_credentials()
        verify_secret(config, request.query_params.get("secret"))
    except CatalogServiceError as exc:
        return JSONResponse(
            {"ok": False, "error": exc.message}, status_code=exc.status_code
        )

    payload = parse_payload(await request.body())
    report = await reconcile(payload, catalog)

    deleted = sum(1 for outcome in report.results if outcome.deleted)
    logger.info(
        "Webhook reconciled: %d/%d products deleted",
        deleted,
        report.count,
        extra={"event_type": report.event_type},
    )
    return JSONResponse(report.to_response())
