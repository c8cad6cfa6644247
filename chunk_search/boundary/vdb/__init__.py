"""
Vector database boundary layer.

Provides the VectorStore interface and its adapters:
- ChromaVectorStore: Production Chroma client (async HTTP)
- InMemoryVectorStore: Dict-backed store for local dev and tests

Dependencies: chromadb
System role: Vector store adapter for semantic retrieval
"""

from chunk_search.boundary.vdb.base import VectorStore
from chunk_search.boundary.vdb.memory_store import InMemoryVectorStore
from chunk_search.boundary.vdb.vector_schemas import VectorHit, VectorMetadata, VectorRecord

__all__ = [
    "InMemoryVectorStore",
    "VectorHit",
    "VectorMetadata",
    "VectorRecord",
    "VectorStore",
]
