"""
In-memory vector store.

Same interface as ChromaVectorStore, backed by a dict. Distances follow
Chroma's conventions so that ranking behaves identically.

Dependencies: math (stdlib)
System role: Local/dev vector store and test double
"""

import math

from chunk_search.boundary.vdb.vector_schemas import VectorHit, VectorRecord
from chunk_search.core.exceptions import VectorStoreError


def _dot(a: list[float], b: list[float]) -> float:
    return sum(x * y for x, y in zip(a, b))


def cosine_distance(a: list[float], b: list[float]) -> float:
    norm = math.sqrt(_dot(a, a)) * math.sqrt(_dot(b, b))
    if norm == 0:
        return 1.0
    return 1.0 - _dot(a, b) / norm


def l2_distance(a: list[float], b: list[float]) -> float:
    # Chroma reports squared L2
    return sum((x - y) ** 2 for x, y in zip(a, b))


def ip_distance(a: list[float], b: list[float]) -> float:
    return 1.0 - _dot(a, b)


DISTANCE_FUNCTIONS = {
    "cosine": cosine_distance,
    "l2": l2_distance,
    "ip": ip_distance,
}


class InMemoryVectorStore:
    """Dict-backed vector store with exact nearest-neighbour search."""

    def __init__(self, distance_metric: str = "cosine") -> None:
        if distance_metric not in DISTANCE_FUNCTIONS:
            raise ValueError(
                f"Invalid distance metric: {distance_metric}. "
                f"Must be one of {sorted(DISTANCE_FUNCTIONS)}."
            )
        self.distance_metric = distance_metric
        self._distance = DISTANCE_FUNCTIONS[distance_metric]
        self._records: dict[str, VectorRecord] = {}

    async def start(self) -> None:
        return None

    async def stop(self) -> None:
        return None

    async def upsert(self, record: VectorRecord) -> None:
        self._check_dimension(record.embedding, "upsert")
        self._records[record.id] = record.model_copy(deep=True)

    async def query(self, embedding: list[float], top_k: int) -> list[VectorHit]:
        self._check_dimension(embedding, "query")
        scored = [
            (self._distance(embedding, record.embedding), record)
            for record in self._records.values()
        ]
        # sorted() is stable: equal distances keep insertion order
        scored.sort(key=lambda pair: pair[0])
        return [
            VectorHit(
                id=record.id,
                distance=distance,
                text=record.metadata.text,
                url=record.metadata.url,
                index=record.metadata.index,
            )
            for distance, record in scored[:top_k]
        ]

    async def count(self) -> int:
        return len(self._records)

    async def get(self, record_id: str) -> VectorRecord | None:
        record = self._records.get(record_id)
        return record.model_copy(deep=True) if record else None

    def _check_dimension(self, embedding: list[float], operation: str) -> None:
        if not self._records:
            return
        expected = len(next(iter(self._records.values())).embedding)
        if len(embedding) != expected:
            raise VectorStoreError(
                message="Embedding dimension does not match stored vectors",
                operation=operation,
                details={"expected": expected, "actual": len(embedding)},
            )
