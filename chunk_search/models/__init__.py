"""
Domain models and API schemas.

Exports: Chunk, IngestionResult, SearchHit, request/response envelopes
"""

from chunk_search.models.chunk import (
    Chunk,
    ChunkRangeItem,
    ChunkRangeResponse,
    IngestionResult,
    IngestResponse,
)
from chunk_search.models.common import ErrorResponse
from chunk_search.models.search import SearchHit, SearchResponse, SearchResultItem

__all__ = [
    "Chunk",
    "ChunkRangeItem",
    "ChunkRangeResponse",
    "ErrorResponse",
    "IngestionResult",
    "IngestResponse",
    "SearchHit",
    "SearchResponse",
    "SearchResultItem",
]
