"""
Application services.

Dependencies: chunk_search.core, chunk_search.boundary
System role: Orchestration of ingestion, range fetch and hybrid search
"""

from chunk_search.application.services.chunk_service import ChunkService
from chunk_search.application.services.search_service import SearchService

__all__ = ["ChunkService", "SearchService"]
