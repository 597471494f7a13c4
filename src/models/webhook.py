"""Schemas describing webhook reconciliation results."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class DeletionOutcome(BaseModel):
    """Result of deleting one remote product."""

    model_config = ConfigDict(populate_by_name=True)

    product_id: str = Field(..., alias="productId")
    deleted: bool
    error: str | None = None


class ReconciliationReport(BaseModel):
    """Response body returned by POST /webhooks."""

    model_config = ConfigDict(populate_by_name=True)

    ok: Literal[True] = True
    event_type: str | None = Field(None, alias="eventType")
    count: int = Field(..., ge=0)
    results: list[DeletionOutcome] = Field(default_factory=list)

    def to_response(self) -> dict:
        """Serialize with camelCase keys, dropping empty error fields."""

        body = self.model_dump(by_alias=True, exclude={"results"})
        body["results"] = [
            outcome.model_dump(by_alias=True, exclude_none=True)
            for outcome in self.results
        ]
        return body
