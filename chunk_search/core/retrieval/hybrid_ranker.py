"""
Hybrid ranker.

Fuses one vector-similarity list and one lexical-relevance list into a
single ranking. The two stores key their records differently (composite id
vs. literal text), so hits are merged on a key derived from the chunk text.

Scoring:
    similarity = 1 - distance            (missing/non-finite distance -> 0)
    score      = similarity + weight * relevance

A key found in only one list keeps only that list's contribution. Output is
ordered by descending score; equal scores keep first-seen order, vector list
first. Truncation to a result limit must happen after ranking (see top_k).

Dependencies: chunk_search.boundary (hit schemas), chunk_search.models
System role: Pure fusion function used by the search service
"""

import math
from typing import Callable, Sequence

from chunk_search.boundary.db.lexical_schemas import LexicalHit
from chunk_search.boundary.vdb.vector_schemas import VectorHit
from chunk_search.core.exceptions import ValidationError
from chunk_search.models.search import SearchHit

MergeKey = Callable[[str], str]


def text_merge_key(text: str) -> str:
    """Merge on the exact chunk text."""
    return text


def normalized_text_merge_key(text: str) -> str:
    """Merge on case-folded text with whitespace runs collapsed."""
    return " ".join(text.split()).casefold()


MERGE_KEY_STRATEGIES: dict[str, MergeKey] = {
    "text": text_merge_key,
    "normalized_text": normalized_text_merge_key,
}


def get_merge_key(name: str) -> MergeKey:
    """
    Look up a merge-key strategy by name.

    Raises:
        ValueError: If the strategy is unknown
    """
    try:
        return MERGE_KEY_STRATEGIES[name]
    except KeyError:
        raise ValueError(
            f"Invalid merge key: {name}. Must be one of {sorted(MERGE_KEY_STRATEGIES)}."
        ) from None


def similarity_from_distance(distance: float | None) -> float:
    """Convert a store distance into similarity; unknown distance means no signal."""
    if distance is None or not math.isfinite(distance):
        return 0.0
    return 1.0 - distance


def _relevance(score: float | None) -> float:
    # non-finite or negative relevance carries no signal
    if score is None or not math.isfinite(score):
        return 0.0
    return max(score, 0.0)


def validate_lexical_weight(lexical_weight: float) -> None:
    """
    Raises:
        ValidationError: If the weight is not a finite number in [0, 1]
    """
    if (
        isinstance(lexical_weight, bool)
        or not isinstance(lexical_weight, (int, float))
        or not math.isfinite(lexical_weight)
        or not 0.0 <= lexical_weight <= 1.0
    ):
        raise ValidationError(
            "lexicalWeight must be a number between 0 and 1",
            field="lexicalWeight",
            details={"value": str(lexical_weight)},
        )


def rank(
    vector_hits: Sequence[VectorHit],
    lexical_hits: Sequence[LexicalHit],
    lexical_weight: float,
    merge_key: MergeKey = text_merge_key,
) -> list[SearchHit]:
    """
    Fuse vector and lexical hits into one ranked list.

    Every key present in either input appears exactly once. When a key
    repeats within one input (the same text stored under several composite
    ids), it keeps its first-seen position and the best score from that input.

    Args:
        vector_hits: Hits ordered by ascending distance
        lexical_hits: Hits ordered by descending relevance
        lexical_weight: Multiplier for lexical relevance, in [0, 1]
        merge_key: Maps chunk text to the key used for merging

    Returns:
        list[SearchHit]: All fused hits, ordered by descending combined score

    Raises:
        ValidationError: If lexical_weight is outside [0, 1]
    """
    validate_lexical_weight(lexical_weight)

    merged: dict[str, SearchHit] = {}

    for hit in vector_hits:
        key = merge_key(hit.text)
        similarity = similarity_from_distance(hit.distance)
        existing = merged.get(key)
        if existing is None:
            merged[key] = SearchHit(
                key=key,
                text=hit.text,
                score=0.0,
                vector_score=similarity,
                vector_id=hit.id,
            )
        elif similarity > existing.vector_score:
            existing.vector_score = similarity
            existing.vector_id = hit.id

    for hit in lexical_hits:
        key = merge_key(hit.text)
        relevance = _relevance(hit.score)
        existing = merged.get(key)
        if existing is None:
            merged[key] = SearchHit(key=key, text=hit.text, score=0.0, lexical_score=relevance)
        elif existing.lexical_score is None or relevance > existing.lexical_score:
            existing.lexical_score = relevance

    for fused in merged.values():
        fused.score = (fused.vector_score or 0.0) + lexical_weight * (fused.lexical_score or 0.0)

    # sorted() keeps insertion order for ties, even with reverse=True
    return sorted(merged.values(), key=lambda fused: fused.score, reverse=True)


def top_k(ranked: Sequence[SearchHit], limit: int) -> list[SearchHit]:
    """
    Truncate an already-ranked list.

    Raises:
        ValidationError: If limit is not a positive integer
    """
    if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
        raise ValidationError("limit must be a positive integer", field="limit")
    return list(ranked[:limit])
