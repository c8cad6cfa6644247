"""Hybrid retrieval: fusion of vector and lexical ranked lists."""

from chunk_search.core.retrieval.hybrid_ranker import (
    MERGE_KEY_STRATEGIES,
    get_merge_key,
    normalized_text_merge_key,
    rank,
    similarity_from_distance,
    text_merge_key,
    top_k,
)

__all__ = [
    "MERGE_KEY_STRATEGIES",
    "get_merge_key",
    "normalized_text_merge_key",
    "rank",
    "similarity_from_distance",
    "text_merge_key",
    "top_k",
]
