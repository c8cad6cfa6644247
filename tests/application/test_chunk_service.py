"""
Test suite for ChunkService.

Tests delegation to the ingestion pipeline and range fetch validation.

System role: Verification of chunk write path and locality reads
"""

from unittest.mock import AsyncMock

import pytest

from chunk_search.application.services.chunk_service import ChunkService
from chunk_search.core.exceptions import ValidationError
from chunk_search.core.ingestion.pipeline import IngestionPipeline
from chunk_search.models.chunk import Chunk, IngestionResult


@pytest.fixture
def chunk_service(embedder, vector_store, lexical_store) -> ChunkService:
    """Provide ChunkService over in-memory collaborators."""
    pipeline = IngestionPipeline(embedder, vector_store, lexical_store)
    return ChunkService(pipeline=pipeline, lexical_store=lexical_store, range_window=2)


class TestChunkServiceIngest:
    """Test suite for ChunkService.ingest()."""

    @pytest.mark.asyncio
    async def test_ingest_should_delegate_to_pipeline(self, lexical_store) -> None:
        """Test ingest returns the pipeline result untouched."""
        # Arrange
        pipeline = AsyncMock()
        expected = IngestionResult(count=1, composite_ids=["u_0"], new_lexical_rows=1)
        pipeline.ingest = AsyncMock(return_value=expected)
        service = ChunkService(pipeline=pipeline, lexical_store=lexical_store)
        chunks = [Chunk(text="t", url="u", index=0)]

        # Act
        result = await service.ingest(chunks)

        # Assert
        assert result is expected
        pipeline.ingest.assert_awaited_once_with(chunks)


class TestChunkServiceFetchRange:
    """Test suite for ChunkService.fetch_range()."""

    @pytest.mark.asyncio
    async def test_fetch_range_should_return_window_ordered_by_index(
        self, chunk_service
    ) -> None:
        """Test rows within index +/- 2 of the same url come back ordered."""
        # Arrange
        chunks = [Chunk(text=f"part {i}", url="u", index=i) for i in (6, 0, 3, 1, 5, 2, 4)]
        chunks.append(Chunk(text="other source", url="v", index=3))
        await chunk_service.ingest(chunks)

        # Act
        rows = await chunk_service.fetch_range("u", 3)

        # Assert
        assert [row.index for row in rows] == [1, 2, 3, 4, 5]
        assert all(row.url == "u" for row in rows)

    @pytest.mark.asyncio
    async def test_fetch_range_should_return_empty_for_unknown_url(self, chunk_service) -> None:
        """Test an unknown url is an empty result, not an error."""
        assert await chunk_service.fetch_range("nowhere", 0) == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("url, index", [("", 1), ("  ", 1), ("u", None), ("u", True)])
    async def test_fetch_range_should_validate_input(self, chunk_service, url, index) -> None:
        """Test blank url or non-integer index raise ValidationError."""
        with pytest.raises(ValidationError, match="Valid url and index are required"):
            await chunk_service.fetch_range(url, index)
