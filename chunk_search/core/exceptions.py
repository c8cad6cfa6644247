"""
Exception hierarchy for the chunk search service.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class ChunkSearchException(Exception):
    """Base exception for all chunk search errors."""

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


class ValidationError(ChunkSearchException):
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


class EmbeddingError(ChunkSearchException):
    """Raised when the embedding provider fails or returns an unusable vector."""

    def __init__(
        self,
        message: str,
        item: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize embedding error.

        Args:
            message: Error message
            item: What was being embedded (chunk composite id or "query")
            details: Additional context
        """
        details = details or {}
        if item:
            details["item"] = item
        super().__init__(message, details)


class StoreError(ChunkSearchException):
    """Raised when a vector or lexical store read/write fails."""

    store: str | None = None

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize store error.

        Args:
            message: Error message
            operation: Operation that failed (upsert, query, insert, search, fetch_range)
            details: Additional context
        """
        details = details or {}
        if self.store:
            details["store"] = self.store
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class VectorStoreError(StoreError):
    """Raised when vector store operations fail."""

    store = "vector"


class LexicalStoreError(StoreError):
    """Raised when lexical store operations fail."""

    store = "lexical"
