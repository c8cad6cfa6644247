"""
Test suite for the in-memory vector and lexical stores.

System role: Verification of the local/dev collaborators used as test doubles
"""

import pytest

from chunk_search.boundary.db.memory_store import InMemoryLexicalStore
from chunk_search.boundary.vdb.memory_store import (
    InMemoryVectorStore,
    cosine_distance,
    ip_distance,
    l2_distance,
)
from chunk_search.boundary.vdb.vector_schemas import VectorMetadata, VectorRecord
from chunk_search.core.exceptions import VectorStoreError


def record(record_id: str, embedding: list[float], text: str = "t") -> VectorRecord:
    url, _, index = record_id.rpartition("_")
    return VectorRecord(
        id=record_id,
        embedding=embedding,
        metadata=VectorMetadata(text=text, url=url, index=int(index)),
    )


class TestDistanceFunctions:
    """Test suite for distance conventions."""

    def test_cosine_distance(self) -> None:
        assert cosine_distance([1.0, 0.0], [1.0, 0.0]) == pytest.approx(0.0)
        assert cosine_distance([1.0, 0.0], [0.0, 1.0]) == pytest.approx(1.0)
        assert cosine_distance([1.0, 0.0], [-1.0, 0.0]) == pytest.approx(2.0)

    def test_cosine_distance_of_zero_vector_is_one(self) -> None:
        assert cosine_distance([0.0, 0.0], [1.0, 0.0]) == 1.0

    def test_l2_distance_is_squared(self) -> None:
        assert l2_distance([0.0, 0.0], [3.0, 4.0]) == pytest.approx(25.0)

    def test_ip_distance(self) -> None:
        assert ip_distance([0.6, 0.8], [0.6, 0.8]) == pytest.approx(0.0)


class TestInMemoryVectorStore:
    """Test suite for InMemoryVectorStore."""

    def test_init_should_reject_unknown_metric(self) -> None:
        with pytest.raises(ValueError, match="Invalid distance metric"):
            InMemoryVectorStore(distance_metric="manhattan")

    @pytest.mark.asyncio
    async def test_upsert_should_overwrite_by_id(self, vector_store) -> None:
        """Test a second upsert with the same id replaces the record."""
        # Act
        await vector_store.upsert(record("u_0", [1.0, 0.0], text="old"))
        await vector_store.upsert(record("u_0", [0.0, 1.0], text="new"))

        # Assert
        assert await vector_store.count() == 1
        stored = await vector_store.get("u_0")
        assert stored.metadata.text == "new"
        assert stored.embedding == [0.0, 1.0]

    @pytest.mark.asyncio
    async def test_query_should_order_by_ascending_distance(self, vector_store) -> None:
        """Test nearest records come first and top_k is honoured."""
        # Arrange
        await vector_store.upsert(record("u_0", [0.0, 1.0], text="far"))
        await vector_store.upsert(record("u_1", [1.0, 0.1], text="near"))
        await vector_store.upsert(record("u_2", [1.0, 1.0], text="middle"))

        # Act
        hits = await vector_store.query([1.0, 0.0], top_k=2)

        # Assert
        assert [hit.text for hit in hits] == ["near", "middle"]
        assert hits[0].distance < hits[1].distance
        assert hits[0].id == "u_1"
        assert hits[0].url == "u"
        assert hits[0].index == 1

    @pytest.mark.asyncio
    async def test_query_should_keep_insertion_order_on_equal_distance(self, vector_store) -> None:
        """Test ties are stable."""
        await vector_store.upsert(record("u_0", [1.0, 0.0], text="first"))
        await vector_store.upsert(record("u_1", [2.0, 0.0], text="second"))

        hits = await vector_store.query([1.0, 0.0], top_k=10)

        assert [hit.text for hit in hits] == ["first", "second"]

    @pytest.mark.asyncio
    async def test_query_should_reject_dimension_mismatch(self, vector_store) -> None:
        """Test vectors of another dimension raise VectorStoreError."""
        await vector_store.upsert(record("u_0", [1.0, 0.0]))

        with pytest.raises(VectorStoreError) as exc_info:
            await vector_store.query([1.0, 0.0, 0.0], top_k=1)

        assert exc_info.value.details["operation"] == "query"

    @pytest.mark.asyncio
    async def test_get_should_return_copy(self, vector_store) -> None:
        """Test callers cannot mutate stored records."""
        await vector_store.upsert(record("u_0", [1.0, 0.0]))

        fetched = await vector_store.get("u_0")
        fetched.embedding.append(9.0)

        assert (await vector_store.get("u_0")).embedding == [1.0, 0.0]
        assert await vector_store.get("missing") is None


class TestInMemoryLexicalStore:
    """Test suite for InMemoryLexicalStore."""

    @pytest.mark.asyncio
    async def test_insert_if_absent_should_ignore_duplicates(self, lexical_store) -> None:
        assert await lexical_store.insert_if_absent("bar", url="u", index=0) is True
        assert await lexical_store.insert_if_absent("bar", url="v", index=3) is False
        assert await lexical_store.count() == 1

    @pytest.mark.asyncio
    async def test_ranked_search_should_score_term_frequency(self, lexical_store) -> None:
        """Test relevance is matching words over text length, best first."""
        # Arrange
        await lexical_store.insert_if_absent("apple banana cherry date")
        await lexical_store.insert_if_absent("apple apple")
        await lexical_store.insert_if_absent("cherry pie")

        # Act
        hits = await lexical_store.ranked_search("Apple", top_k=10)

        # Assert
        assert [(hit.text, hit.score) for hit in hits] == [
            ("apple apple", pytest.approx(1.0)),
            ("apple banana cherry date", pytest.approx(0.25)),
        ]

    @pytest.mark.asyncio
    async def test_ranked_search_should_return_nothing_for_blank_query(self, lexical_store) -> None:
        await lexical_store.insert_if_absent("anything")

        assert await lexical_store.ranked_search("  ", top_k=10) == []

    @pytest.mark.asyncio
    async def test_ranked_search_should_honour_top_k(self, lexical_store) -> None:
        for i in range(5):
            await lexical_store.insert_if_absent(f"term filler{i}")

        assert len(await lexical_store.ranked_search("term", top_k=3)) == 3

    @pytest.mark.asyncio
    async def test_store_satisfies_lifecycle(self) -> None:
        """Test start/stop are no-ops on a fresh store."""
        store = InMemoryLexicalStore()
        await store.start()
        await store.stop()
        assert await store.count() == 0
