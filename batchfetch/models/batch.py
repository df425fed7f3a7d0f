"""
Batch fetch models.

Failure context handed to the batch error hook, the detailed fetch report,
and the HTTP request/response schemas.

Dependencies: pydantic
System role: Data contracts around the batch fetch executor
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class BatchErrorContext(BaseModel):
    """Where a failed chunk sat within a batch fetch call."""

    model_config = ConfigDict(frozen=True)

    collection: str
    batch_index: int = Field(ge=1, description="1-based position of the chunk")
    batch_size: int = Field(ge=0, description="Number of keys in the chunk")


class BatchFetchReport(BaseModel):
    """
    Detailed outcome of a batch fetch.

    `documents` is exactly what BatchFetcher.fetch returns. The other fields
    separate ids that do not exist from ids whose chunk failed.
    """

    collection: str
    documents: dict[str, dict[str, Any]] = Field(default_factory=dict)
    not_found: list[str] = Field(default_factory=list)
    failed: list[str] = Field(default_factory=list)
    failed_batches: list[int] = Field(default_factory=list)

    @property
    def complete(self) -> bool:
        """True when every chunk succeeded."""
        return not self.failed_batches


class BatchGetRequest(BaseModel):
    """Request body for POST /collections/{collection}/batch-get."""

    ids: list[str] = Field(description="Document ids, duplicates allowed")
    ordered: bool = Field(
        default=False,
        description="Return a list aligned with `ids` instead of a mapping",
    )


class BatchGetResponse(BaseModel):
    """Response body for a batch get."""

    collection: str
    documents: dict[str, dict[str, Any]] | None = None
    items: list[dict[str, Any] | None] | None = None
    count: int = Field(description="Number of documents found")
