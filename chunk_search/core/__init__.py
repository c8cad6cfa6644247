"""
Core domain logic: hybrid ranking, ingestion pipeline, exception hierarchy.

Dependencies: None beyond the boundary protocols
System role: Business logic independent of concrete stores and providers
"""

from chunk_search.core.exceptions import (
    ChunkSearchException,
    EmbeddingError,
    LexicalStoreError,
    StoreError,
    ValidationError,
    VectorStoreError,
)

__all__ = [
    "ChunkSearchException",
    "EmbeddingError",
    "LexicalStoreError",
    "StoreError",
    "ValidationError",
    "VectorStoreError",
]
