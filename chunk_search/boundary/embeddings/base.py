"""
Embedding provider interface.

Dependencies: typing
System role: Contract between the core and embedding backends
"""

from typing import Protocol


class EmbeddingProvider(Protocol):
    """Opaque text -> vector function with a fixed dimension."""

    dimension: int

    async def embed(self, text: str) -> list[float]:
        """
        Embed a single text.

        Raises:
            EmbeddingError: On provider or network failure; no partial result
        """
