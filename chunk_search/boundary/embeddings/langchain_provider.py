"""
LangChain embedding adapter.

Wraps any ``langchain_core.embeddings.Embeddings`` implementation and
translates its failures into EmbeddingError.

Dependencies: langchain_core, chunk_search.core.exceptions
System role: Production embedding provider
"""

import logging

from langchain_core.embeddings import Embeddings

from chunk_search.core.exceptions import EmbeddingError

logger = logging.getLogger(__name__)


class LangChainEmbeddingProvider:
    """Embedding provider backed by a LangChain Embeddings model."""

    def __init__(self, embeddings: Embeddings, dimension: int) -> None:
        """
        Initialize the provider.

        Args:
            embeddings: LangChain embeddings model (Gemini, OpenAI, ...)
            dimension: Expected vector length; any other length is rejected
        """
        self._embeddings = embeddings
        self.dimension = dimension

    async def embed(self, text: str) -> list[float]:
        """
        Embed text through the wrapped model.

        Args:
            text: Text to embed

        Returns:
            list[float]: Embedding of length ``dimension``

        Raises:
            EmbeddingError: If the provider call fails or returns a vector of the wrong size
        """
        try:
            vector = await self._embeddings.aembed_query(text)
        except Exception as e:
            raise EmbeddingError(
                message=f"Embedding provider call failed: {e}",
                details={"provider": type(self._embeddings).__name__, "text_length": len(text)},
            ) from e

        if len(vector) != self.dimension:
            raise EmbeddingError(
                message="Embedding dimension mismatch",
                details={"expected": self.dimension, "actual": len(vector)},
            )
        return [float(value) for value in vector]
