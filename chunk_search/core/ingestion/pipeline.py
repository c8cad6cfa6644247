"""
Ingestion pipeline.

For each chunk, in input order and one at a time:
    1. embed the text
    2. upsert the vector record (overwrite by composite id)
    3. insert the text into the lexical store unless already present

Both writes are idempotent, so a batch that fails midway can be resubmitted
as-is. There is no transaction across the batch or across the two stores:
chunks before the failing one stay committed, and the failing chunk may have
reached the vector store if it failed in the lexical phase.

Dependencies: chunk_search.boundary, chunk_search.core.exceptions
System role: Dual-write ingestion with deterministic partial-failure reporting
"""

import logging
import time
from typing import Sequence

from chunk_search.boundary.db.lexical_store import LexicalStore
from chunk_search.boundary.embeddings.base import EmbeddingProvider
from chunk_search.boundary.vdb.base import VectorStore
from chunk_search.boundary.vdb.vector_schemas import VectorMetadata, VectorRecord
from chunk_search.core.exceptions import ChunkSearchException, EmbeddingError, ValidationError
from chunk_search.models.chunk import Chunk, IngestionResult
from chunk_search.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


def _is_blank(value: str | None) -> bool:
    return not isinstance(value, str) or not value.strip()


def validate_chunks(chunks: Sequence[Chunk]) -> None:
    """
    Validate a whole batch before any write happens.

    Raises:
        ValidationError: On an empty batch, or a chunk with blank text/url or no integer index
    """
    if not chunks:
        raise ValidationError("Array of chunks is required", field="chunks")

    for position, chunk in enumerate(chunks):
        if _is_blank(chunk.text):
            raise ValidationError(
                "Chunk text must be a non-empty string",
                field=f"chunks[{position}].text",
            )
        if _is_blank(chunk.url):
            raise ValidationError(
                "Chunk url must be a non-empty string",
                field=f"chunks[{position}].url",
            )
        if isinstance(chunk.index, bool) or not isinstance(chunk.index, int):
            raise ValidationError(
                "Chunk index must be an integer",
                field=f"chunks[{position}].index",
            )


class IngestionPipeline:
    """
    Sequential dual-write pipeline.

    Collaborators are injected; the pipeline keeps no copy of what it writes.
    """

    def __init__(
        self,
        embedding_provider: EmbeddingProvider,
        vector_store: VectorStore,
        lexical_store: LexicalStore,
    ) -> None:
        self.embedding_provider = embedding_provider
        self.vector_store = vector_store
        self.lexical_store = lexical_store

    async def ingest(self, chunks: Sequence[Chunk]) -> IngestionResult:
        """
        Ingest a batch of chunks.

        Args:
            chunks: Ordered, non-empty sequence of chunks

        Returns:
            IngestionResult: Count and composite ids of processed chunks

        Raises:
            ValidationError: If the batch is malformed (nothing is written)
            EmbeddingError: If embedding a chunk fails (batch aborted)
            StoreError: If a vector or lexical write fails (batch aborted)

        The raised error's ``details`` carry ``position``, ``composite_id``,
        ``phase`` and ``committed`` (chunks fully written before the failure).
        """
        validate_chunks(chunks)

        start_time = time.perf_counter()
        composite_ids: list[str] = []
        new_lexical_rows = 0

        logger.info("Ingestion batch started", extra={"chunk_count": len(chunks)})

        for position, chunk in enumerate(chunks):
            composite_id = chunk.composite_id
            phase = "embed"
            try:
                embedding = await self.embedding_provider.embed(chunk.text)

                phase = "vector_upsert"
                await self.vector_store.upsert(
                    VectorRecord(
                        id=composite_id,
                        embedding=embedding,
                        metadata=VectorMetadata(text=chunk.text, url=chunk.url, index=chunk.index),
                    )
                )

                phase = "lexical_insert"
                inserted = await self.lexical_store.insert_if_absent(
                    chunk.text, url=chunk.url, index=chunk.index
                )
            except ChunkSearchException as e:
                if isinstance(e, EmbeddingError):
                    e.details.setdefault("item", composite_id)
                e.details.update(
                    {
                        "position": position,
                        "composite_id": composite_id,
                        "phase": phase,
                        "committed": position,
                    }
                )
                log_exception_with_context(
                    logger,
                    "Ingestion batch aborted",
                    e,
                    composite_id=composite_id,
                    position=position,
                    phase=phase,
                )
                raise

            composite_ids.append(composite_id)
            new_lexical_rows += int(inserted)
            logger.info(
                f"Successfully added chunk: {composite_id}",
                extra={"composite_id": composite_id, "new_lexical_row": inserted},
            )

        logger.info(
            "Ingestion batch completed",
            extra={
                "chunk_count": len(composite_ids),
                "new_lexical_rows": new_lexical_rows,
                "processing_time_ms": round((time.perf_counter() - start_time) * 1000, 2),
            },
        )
        return IngestionResult(
            count=len(composite_ids),
            composite_ids=composite_ids,
            new_lexical_rows=new_lexical_rows,
        )
