"""
Exception hierarchy for the batch fetch library.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class BatchFetchException(Exception):
    """Base exception for all batch fetch errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(BatchFetchException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class InvalidChunkSizeError(ValidationError):
    """Raised when a chunk size below 1 is requested."""

    def __init__(self, size: int, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["size"] = size
        super().__init__(f"Chunk size must be at least 1, got {size}", "size", details)


class UnknownCollectionError(ValidationError):
    """Raised when a collection name is not one of the known collections."""

    def __init__(self, collection: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["collection"] = collection
        super().__init__(f"Unknown collection: {collection}", "collection", details)


class StoreError(BatchFetchException):
    """Base exception for document store failures."""

    def __init__(
        self,
        message: str,
        collection: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize store error.

        Args:
            message: Error message
            collection: Collection the failing lookup targeted
            details: Additional context
        """
        details = details or {}
        if collection:
            details["collection"] = collection
        super().__init__(message, details)


class BatchSizeExceededError(StoreError):
    """Raised when a lookup asks for more keys than the store accepts."""

    def __init__(
        self,
        collection: str,
        requested: int,
        limit: int,
    ) -> None:
        """
        Initialize batch size error.

        Args:
            collection: Target collection
            requested: Number of keys in the rejected lookup
            limit: Store's per-query key limit
        """
        super().__init__(
            f"Lookup of {requested} keys exceeds store limit of {limit}",
            collection,
            {"requested": requested, "limit": limit},
        )


class StoreLookupError(StoreError):
    """Raised when the underlying database lookup fails."""

    pass
