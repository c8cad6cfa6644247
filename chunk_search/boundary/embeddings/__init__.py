"""
Embedding provider boundary layer.

- LangChainEmbeddingProvider: adapter over any LangChain Embeddings model
- HashingEmbeddingProvider: deterministic offline provider for dev and tests

Dependencies: langchain_core
System role: text -> vector adapter used by ingestion and search
"""

from chunk_search.boundary.embeddings.base import EmbeddingProvider
from chunk_search.boundary.embeddings.factory import build_embedding_provider
from chunk_search.boundary.embeddings.fake_provider import HashingEmbeddingProvider
from chunk_search.boundary.embeddings.langchain_provider import LangChainEmbeddingProvider

__all__ = [
    "EmbeddingProvider",
    "HashingEmbeddingProvider",
    "LangChainEmbeddingProvider",
    "build_embedding_provider",
]
