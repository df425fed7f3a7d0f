"""Pydantic models for batch fetch results and API payloads."""

from batchfetch.models.batch import (
    BatchErrorContext,
    BatchFetchReport,
    BatchGetRequest,
    BatchGetResponse,
)

__all__ = [
    "BatchErrorContext",
    "BatchFetchReport",
    "BatchGetRequest",
    "BatchGetResponse",
]
