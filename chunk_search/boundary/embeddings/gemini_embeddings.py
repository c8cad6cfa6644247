"""
Google Generative AI Embeddings wrapper with fixed output dimensionality.

Wraps GoogleGenerativeAIEmbeddings to ensure consistent vector dimensions
across all embedding calls. This is required because the base class ignores
output_dimensionality in the constructor.

Dependencies: langchain_google_genai
System role: Embedding dimension consistency for the vector collection
"""

import logging
from typing import List

from langchain_google_genai import GoogleGenerativeAIEmbeddings

logger = logging.getLogger(__name__)


class FixedDimensionEmbeddings(GoogleGenerativeAIEmbeddings):
    """
    GoogleGenerativeAIEmbeddings wrapper with fixed output dimensionality.

    The base GoogleGenerativeAIEmbeddings class ignores output_dimensionality
    in the constructor. This wrapper ensures all embed calls use the specified
    dimension, which the vector collection depends on.
    """

    _output_dimensionality: int = 3072

    def __init__(
        self,
        model: str = "models/gemini-embedding-001",
        output_dimensionality: int = 3072,
        **kwargs,
    ) -> None:
        """
        Initialize embeddings with fixed output dimensionality.

        Args:
            model: Google embedding model ID
            output_dimensionality: Fixed dimension for all embeddings
            **kwargs: Additional arguments for GoogleGenerativeAIEmbeddings
        """
        super().__init__(model=model, **kwargs)
        self._output_dimensionality = output_dimensionality
        logger.info(
            f"{__name__}:__init__ - Initialized with model={model}, "
            f"output_dimensionality={output_dimensionality}"
        )

    def embed_query(
        self,
        text: str,
        task_type: str | None = None,
        title: str | None = None,
        output_dimensionality: int | None = None,
    ) -> List[float]:
        """Embed query with the configured dimension unless explicitly overridden."""
        dim = output_dimensionality or self._output_dimensionality
        return super().embed_query(
            text,
            task_type=task_type,
            title=title,
            output_dimensionality=dim,
        )

    async def aembed_query(
        self,
        text: str,
        task_type: str | None = None,
        title: str | None = None,
        output_dimensionality: int | None = None,
    ) -> List[float]:
        """Async variant of embed_query with the same dimension pinning."""
        dim = output_dimensionality or self._output_dimensionality
        return await super().aembed_query(
            text,
            task_type=task_type,
            title=title,
            output_dimensionality=dim,
        )
