"""
Embedding provider factory.

Selects the embedding backend from EMBEDDING_PROVIDER. Provider SDKs are
imported lazily so that only the selected one needs to be installed and
configured.

Dependencies: langchain_google_genai, langchain_openai, chunk_search.configs
System role: Embedding provider instantiation and selection
"""

import logging

from chunk_search.boundary.embeddings.base import EmbeddingProvider
from chunk_search.boundary.embeddings.fake_provider import HashingEmbeddingProvider
from chunk_search.boundary.embeddings.langchain_provider import LangChainEmbeddingProvider
from chunk_search.configs.embedding import EmbeddingSettings

logger = logging.getLogger(__name__)


def build_embedding_provider(config: EmbeddingSettings) -> EmbeddingProvider:
    """
    Build the embedding provider selected by configuration.

    Args:
        config: Embedding settings

    Returns:
        EmbeddingProvider: Ready-to-use provider

    Raises:
        ValueError: If provider is invalid
    """
    provider = config.provider.lower()

    if provider == "openai":
        from langchain_openai import OpenAIEmbeddings

        logger.info(f"{__name__}:build_embedding_provider - OpenAI model={config.model}")
        kwargs = {"model": config.model, "dimensions": config.dimension}
        if config.api_key:
            kwargs["api_key"] = config.api_key
        return LangChainEmbeddingProvider(OpenAIEmbeddings(**kwargs), dimension=config.dimension)

    elif provider == "google":
        from chunk_search.boundary.embeddings.gemini_embeddings import FixedDimensionEmbeddings

        logger.info(f"{__name__}:build_embedding_provider - Gemini model={config.model}")
        kwargs = {"model": config.model, "output_dimensionality": config.dimension}
        if config.api_key:
            kwargs["google_api_key"] = config.api_key
        return LangChainEmbeddingProvider(FixedDimensionEmbeddings(**kwargs), dimension=config.dimension)

    elif provider == "fake":
        logger.info(f"{__name__}:build_embedding_provider - Hashing provider (offline mode)")
        return HashingEmbeddingProvider(dimension=config.dimension)

    else:
        raise ValueError(
            f"Invalid embedding provider: {provider}. "
            f"Must be 'openai', 'google' or 'fake'."
        )
