"""
Search service.

Runs one hybrid query: embeds the query and asks the vector store for its
nearest neighbours while the lexical store runs full-text search on the raw
query, then fuses both candidate lists with the hybrid ranker.

Dependencies: asyncio, chunk_search.core.retrieval, chunk_search.boundary
System role: Query orchestration for GET /search
"""

import asyncio
import logging
import time

from chunk_search.boundary.db.lexical_schemas import LexicalHit
from chunk_search.boundary.db.lexical_store import LexicalStore
from chunk_search.boundary.embeddings.base import EmbeddingProvider
from chunk_search.boundary.vdb.base import VectorStore
from chunk_search.boundary.vdb.vector_schemas import VectorHit
from chunk_search.configs.search import SearchSettings
from chunk_search.core.exceptions import EmbeddingError, ValidationError
from chunk_search.core.retrieval.hybrid_ranker import (
    get_merge_key,
    rank,
    top_k,
    validate_lexical_weight,
)
from chunk_search.models.search import SearchHit
from chunk_search.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


def _validate_count(value: int, field: str, maximum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(
            f"{field} must be a positive integer",
            field=field,
            details={"value": value},
        )
    if value > maximum:
        raise ValidationError(
            f"{field} must not exceed {maximum}",
            field=field,
            details={"value": value, "maximum": maximum},
        )


class SearchService:
    """Hybrid search over the vector and lexical stores."""

    def __init__(
        self,
        embedding_provider: EmbeddingProvider,
        vector_store: VectorStore,
        lexical_store: LexicalStore,
        config: SearchSettings | None = None,
    ) -> None:
        """
        Initialize search service.

        Args:
            embedding_provider: Embeds the query text
            vector_store: Source of similarity candidates
            lexical_store: Source of full-text candidates
            config: Defaults and limits (environment-driven when omitted)
        """
        self.embedding_provider = embedding_provider
        self.vector_store = vector_store
        self.lexical_store = lexical_store
        self.config = config or SearchSettings()
        self.merge_key = get_merge_key(self.config.merge_key)

    def resolve_parameters(
        self,
        limit: int | None = None,
        search_breadth: int | None = None,
        lexical_weight: float | None = None,
    ) -> tuple[int, int, float]:
        """
        Apply defaults to omitted parameters and validate the result.

        Only ``None`` means omitted: an explicit ``0.0`` weight is kept.

        Raises:
            ValidationError: If any parameter is out of range
        """
        limit = self.config.default_limit if limit is None else limit
        search_breadth = self.config.default_breadth if search_breadth is None else search_breadth
        lexical_weight = (
            self.config.default_lexical_weight if lexical_weight is None else lexical_weight
        )

        _validate_count(limit, "limit", self.config.max_limit)
        _validate_count(search_breadth, "searchBreadth", self.config.max_breadth)

        validate_lexical_weight(lexical_weight)

        return limit, search_breadth, float(lexical_weight)

    async def search(
        self,
        query: str,
        limit: int | None = None,
        search_breadth: int | None = None,
        lexical_weight: float | None = None,
    ) -> list[SearchHit]:
        """
        Run a hybrid query.

        Args:
            query: Free-text query
            limit: Maximum results returned
            search_breadth: Candidates requested from each store
            lexical_weight: Multiplier for lexical relevance

        Returns:
            list[SearchHit]: At most ``limit`` hits, best first

        Raises:
            ValidationError: On a blank query or out-of-range parameter
                (raised before any store or provider call)
            EmbeddingError: If the query cannot be embedded
            StoreError: If either store query fails
        """
        if not isinstance(query, str) or not query.strip():
            raise ValidationError("Query is required", field="query")

        limit, search_breadth, lexical_weight = self.resolve_parameters(
            limit, search_breadth, lexical_weight
        )

        start_time = time.perf_counter()

        # Both branches always run to completion; the first failure is re-raised.
        vector_result, lexical_result = await asyncio.gather(
            self._vector_candidates(query, search_breadth),
            self.lexical_store.ranked_search(query, search_breadth),
            return_exceptions=True,
        )
        for outcome in (vector_result, lexical_result):
            if isinstance(outcome, BaseException):
                log_exception_with_context(
                    logger, "Hybrid search failed", outcome, query=query, search_breadth=search_breadth
                )
                raise outcome

        vector_hits: list[VectorHit] = vector_result
        lexical_hits: list[LexicalHit] = lexical_result

        ranked = rank(vector_hits, lexical_hits, lexical_weight, merge_key=self.merge_key)
        results = top_k(ranked, limit)

        logger.info(
            "Hybrid search completed",
            extra={
                "vector_candidates": len(vector_hits),
                "lexical_candidates": len(lexical_hits),
                "merged_candidates": len(ranked),
                "result_count": len(results),
                "processing_time_ms": round((time.perf_counter() - start_time) * 1000, 2),
            },
        )
        return results

    async def _vector_candidates(self, query: str, search_breadth: int) -> list[VectorHit]:
        try:
            embedding = await self.embedding_provider.embed(query)
        except EmbeddingError as e:
            e.details.setdefault("item", "query")
            raise
        return await self.vector_store.query(embedding, search_breadth)
