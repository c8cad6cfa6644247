"""
Deterministic hashing embedding provider.

Maps each lower-cased word to a bucket of a fixed-size vector (feature
hashing) and L2-normalises the result. Texts that share words end up
close under cosine distance, which is enough for offline development
and for tests that need predictable neighbours.

Dependencies: hashlib, math, re (stdlib)
System role: Offline embedding provider and test double
"""

import hashlib
import math
import re

from chunk_search.core.exceptions import EmbeddingError

_WORD_RE = re.compile(r"\w+", re.UNICODE)


class HashingEmbeddingProvider:
    """Feature-hashing embedder with no external calls."""

    def __init__(self, dimension: int = 64) -> None:
        if dimension <= 0:
            raise ValueError("dimension must be positive")
        self.dimension = dimension
        self.calls: list[str] = []

    async def embed(self, text: str) -> list[float]:
        self.calls.append(text)
        if not isinstance(text, str):
            raise EmbeddingError("Text to embed must be a string")

        vector = [0.0] * self.dimension
        for word in _WORD_RE.findall(text.lower()):
            digest = hashlib.md5(word.encode("utf-8")).digest()
            bucket = int.from_bytes(digest[:4], "big") % self.dimension
            sign = 1.0 if digest[4] % 2 == 0 else -1.0
            vector[bucket] += sign

        norm = math.sqrt(sum(value * value for value in vector))
        if norm == 0:
            return vector
        return [value / norm for value in vector]
