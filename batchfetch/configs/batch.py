"""
Batch fetch configuration settings.

Controls chunk sizing, per-chunk timeouts, and the opt-in retry policy
applied around the document store.

Dependencies: pydantic, pydantic_settings
System role: Tuning knobs for the batch fetch executor
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from batchfetch.configs.base import BaseSettings


class BatchFetchSettings(BaseSettings):
    """Batch fetch executor configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="BATCH_FETCH_",
        case_sensitive=False,
        extra="ignore",
    )

    batch_size: int = Field(
        default=10,
        ge=1,
        description="Maximum number of keys sent to the store in one lookup",
    )
    chunk_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Per-chunk timeout; a chunk that exceeds it counts as failed",
    )
    max_request_ids: int = Field(
        default=500,
        ge=1,
        description="Maximum identifiers accepted by a single HTTP batch request",
    )

    retry_attempts: int = Field(
        default=1,
        ge=1,
        description="Store attempts per chunk (1 disables retry)",
    )
    retry_initial_wait: float = Field(
        default=0.5,
        ge=0,
        description="Initial backoff in seconds between retry attempts",
    )
    retry_max_wait: float = Field(
        default=5.0,
        ge=0,
        description="Upper bound in seconds for a single backoff",
    )
