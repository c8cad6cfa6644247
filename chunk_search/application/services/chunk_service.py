"""
Chunk service.

Business logic for chunk ingestion and neighbourhood (range) fetch.

Dependencies: chunk_search.core.ingestion, chunk_search.boundary.db
System role: Chunk write path and locality reads
"""

import logging
from typing import Sequence

from chunk_search.boundary.db.lexical_schemas import StoredText
from chunk_search.boundary.db.lexical_store import LexicalStore
from chunk_search.core.exceptions import ValidationError
from chunk_search.core.ingestion.pipeline import IngestionPipeline
from chunk_search.models.chunk import Chunk, IngestionResult
from chunk_search.observability.log_utils import safe_log_value

logger = logging.getLogger(__name__)


class ChunkService:
    """Service for chunk ingestion and range fetch."""

    def __init__(
        self,
        pipeline: IngestionPipeline,
        lexical_store: LexicalStore,
        range_window: int = 2,
    ) -> None:
        """
        Initialize chunk service.

        Args:
            pipeline: Dual-write ingestion pipeline
            lexical_store: Store queried for range fetch
            range_window: Neighbours fetched on each side of the requested index
        """
        self.pipeline = pipeline
        self.lexical_store = lexical_store
        self.range_window = range_window

    async def ingest(self, chunks: Sequence[Chunk]) -> IngestionResult:
        """Ingest a batch of chunks. See IngestionPipeline.ingest."""
        return await self.pipeline.ingest(chunks)

    async def fetch_range(self, url: str, index: int) -> list[StoredText]:
        """
        Fetch stored texts near a position in a source.

        Args:
            url: Origin URL
            index: Centre chunk index

        Returns:
            list[StoredText]: Rows with index in [index - window, index + window],
                ordered by index

        Raises:
            ValidationError: If url is blank or index is not an integer
        """
        if not isinstance(url, str) or not url.strip():
            raise ValidationError("Valid url and index are required", field="url")
        if isinstance(index, bool) or not isinstance(index, int):
            raise ValidationError("Valid url and index are required", field="index")

        rows = await self.lexical_store.fetch_range(url, index, self.range_window)
        logger.info(
            "Range fetch completed",
            extra={"url": safe_log_value(url), "index": index, "row_count": len(rows)},
        )
        return rows
