"""Remove one-off custom products once an order referencing them arrives."""

from __future__ import annotations

import asyncio
import hmac
import json
import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from src.config import CatalogConfig
from src.models.catalog import MARKER_ATTRIBUTE
from src.models.webhook import DeletionOutcome, ReconciliationReport
from src.services.clients.catalog_client import CatalogClient
from src.services.errors import AuthorizationError

logger = logging.getLogger(__name__)

Extractor = Callable[[dict], Any]


def _dig(source: Any, *path: str) -> Any:
    for key in path:
        if not isinstance(source, dict):
            return None
        source = source.get(key)
    return source


# Ordered lookups; the first one yielding a usable value wins.
ITEM_EXTRACTORS: tuple[Extractor, ...] = (
    lambda payload: _dig(payload, "order", "items"),
    lambda payload: _dig(payload, "data", "order", "items"),
    lambda payload: _dig(payload, "items"),
)

ATTRIBUTE_EXTRACTORS: tuple[Extractor, ...] = (
    lambda item: _dig(item, "attributes"),
    lambda item: _dig(item, "product", "attributes"),
)

PRODUCT_ID_EXTRACTORS: tuple[Extractor, ...] = (
    lambda item: _dig(item, "productId"),
    lambda item: _dig(item, "product", "id"),
    lambda item: _dig(item, "id"),
)


def _non_empty_list(value: Any) -> bool:
    return isinstance(value, list) and len(value) > 0


def _defined(value: Any) -> bool:
    return value is not None


def first_match(
    extractors: Iterable[Extractor],
    source: dict,
    accept: Callable[[Any], bool] = _non_empty_list,
) -> Any:
    """Run extractors in order and return the first accepted value."""

    for extractor in extractors:
        value = extractor(source)
        if accept(value):
            return value
    return None


def parse_payload(raw: bytes) -> dict:
    """Decode a webhook body, treating anything but a JSON object as empty."""

    try:
        payload = json.loads(raw or b"{}")
    except (UnicodeDecodeError, ValueError):
        logger.warning("Webhook body is not valid JSON, treating as empty")
        return {}
    return payload if isinstance(payload, dict) else {}


def extract_items(payload: dict) -> list[dict]:
    items = first_match(ITEM_EXTRACTORS, payload) or []
    return [item for item in items if isinstance(item, dict)]


def is_one_off(item: dict) -> bool:
    """True when the item carries customPriceOneOff=true (case-insensitive)."""

    attributes = first_match(ATTRIBUTE_EXTRACTORS, item) or []
    marker = MARKER_ATTRIBUTE.lower()
    for attribute in attributes:
        if not isinstance(attribute, dict):
            continue
        name = str(attribute.get("name", "")).lower()
        value = str(attribute.get("value", "")).lower()
        if name == marker and value == "true":
            return True
    return False


def resolve_product_id(item: dict) -> str | None:
    product_id = first_match(PRODUCT_ID_EXTRACTORS, item, accept=_defined)
    return None if product_id is None else str(product_id)


def collect_targets(payload: dict) -> list[str]:
    """Unique product ids of flagged items, in first-seen order."""

    targets: dict[str, None] = {}
    for item in extract_items(payload):
        if not is_one_off(item):
            continue
        product_id = resolve_product_id(item)
        if product_id is not None:
            targets.setdefault(product_id, None)
    return list(targets)


def verify_secret(config: CatalogConfig, provided: str | None) -> None:
    """Reject the call only when a secret is configured and does not match."""

    if not config.webhook_secret:
        return
    if provided is None or not hmac.compare_digest(
        provided.encode("utf-8"), config.webhook_secret.encode("utf-8")
    ):
        logger.warning("Webhook rejected: shared secret mismatch")
        raise AuthorizationError("Forbidden")


async def _delete_one(client: CatalogClient, product_id: str) -> DeletionOutcome:
    try:
        await client.delete_product(product_id)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        message = str(exc) or exc.__class__.__name__
        logger.warning(
            "Failed to delete product %s: %s",
            product_id,
            message,
            extra={"product_id": product_id},
        )
        return DeletionOutcome(product_id=product_id, deleted=False, error=message)
    return DeletionOutcome(product_id=product_id, deleted=True)


async def delete_targets(
    client: CatalogClient,
    targets: Sequence[str],
) -> list[DeletionOutcome]:
    """Delete every target concurrently; each failure stays in its own outcome."""

    if not targets:
        return []
    return list(await asyncio.gather(*(_delete_one(client, t) for t in targets)))


async def reconcile(payload: dict, client: CatalogClient) -> ReconciliationReport:
    event_type = payload.get("eventType")
    targets = collect_targets(payload)

    logger.info(
        "Webhook received",
        extra={"event_type": event_type, "target_count": len(targets)},
    )

    results = await delete_targets(client, targets)
    return ReconciliationReport(
        event_type=None if event_type is None else str(event_type),
        count=len(targets),
        results=results,
    )
