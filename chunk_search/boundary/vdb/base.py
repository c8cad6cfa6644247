"""
Vector store interface.

Dependencies: typing
System role: Contract between the core and concrete vector stores
"""

from typing import Protocol

from chunk_search.boundary.vdb.vector_schemas import VectorHit, VectorRecord


class VectorStore(Protocol):
    """Nearest-neighbour index keyed by composite id."""

    async def start(self) -> None:
        """Open connections and ensure the collection exists."""

    async def stop(self) -> None:
        """Release connections."""

    async def upsert(self, record: VectorRecord) -> None:
        """Insert or overwrite the record with ``record.id``."""

    async def query(self, embedding: list[float], top_k: int) -> list[VectorHit]:
        """Return up to ``top_k`` hits ordered by ascending distance."""

    async def count(self) -> int:
        """Number of stored records."""

    async def get(self, record_id: str) -> VectorRecord | None:
        """Fetch a record by id, None if absent."""
