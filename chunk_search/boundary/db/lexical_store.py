"""
Lexical store interface.

Dependencies: typing
System role: Contract between the core and concrete full-text stores
"""

from typing import Protocol

from chunk_search.boundary.db.lexical_schemas import LexicalHit, StoredText


class LexicalStore(Protocol):
    """Text table with insert-or-ignore writes and ranked full-text search."""

    async def start(self) -> None:
        """Open connections and bootstrap the schema."""

    async def stop(self) -> None:
        """Release connections."""

    async def insert_if_absent(
        self,
        text: str,
        url: str | None = None,
        index: int | None = None,
    ) -> bool:
        """Store ``text`` unless it already exists; True if a row was added."""

    async def ranked_search(self, query: str, top_k: int) -> list[LexicalHit]:
        """Return up to ``top_k`` hits ordered by descending relevance."""

    async def fetch_range(self, url: str, index: int, window: int) -> list[StoredText]:
        """Rows first ingested from ``url`` with index in ``index ± window``."""

    async def count(self) -> int:
        """Number of stored rows."""
