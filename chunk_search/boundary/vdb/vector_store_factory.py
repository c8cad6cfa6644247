"""
Vector store factory for selecting between Chroma (prod) and in-memory (dev).

Depends on VECTOR_STORE_STORE_TYPE environment variable.
Provides consistent interface regardless of underlying implementation.

Dependencies: chunk_search.boundary.vdb, chunk_search.configs
System role: Vector store instantiation and selection
"""

import logging

from chunk_search.boundary.vdb.base import VectorStore
from chunk_search.boundary.vdb.memory_store import InMemoryVectorStore
from chunk_search.configs.vector_store import VectorStoreSettings

logger = logging.getLogger(__name__)


def build_vector_store(config: VectorStoreSettings) -> VectorStore:
    """
    Build the vector store selected by configuration.

    Args:
        config: Vector store settings

    Returns:
        VectorStore: Unstarted store instance

    Raises:
        ValueError: If store_type is invalid
    """
    store_type = config.store_type.lower()

    if store_type == "chroma":
        from chunk_search.boundary.vdb.chroma_store import ChromaVectorStore

        logger.info(
            f"{__name__}:build_vector_store - Creating Chroma vector store "
            f"({config.chroma_host}:{config.chroma_port}/{config.collection_name})"
        )
        return ChromaVectorStore(
            host=config.chroma_host,
            port=config.chroma_port,
            ssl=config.chroma_ssl,
            collection_name=config.collection_name,
            distance_metric=config.distance_metric,
        )

    elif store_type == "memory":
        logger.info(f"{__name__}:build_vector_store - Creating in-memory vector store (local dev mode)")
        return InMemoryVectorStore(distance_metric=config.distance_metric)

    else:
        raise ValueError(
            f"Invalid vector store type: {store_type}. "
            f"Must be 'chroma' or 'memory'."
        )
