"""
Search result models.

Dependencies: pydantic
System role: Hybrid ranking output and search API contracts
"""

from pydantic import BaseModel, Field


class SearchHit(BaseModel):
    """One fused result produced by the hybrid ranker."""

    key: str = Field(description="Merge key shared by the vector and lexical hits")
    text: str = Field(description="Chunk text (first-seen spelling for the key)")
    score: float = Field(description="Combined score: similarity + weight * relevance")
    vector_score: float | None = Field(
        default=None,
        description="Similarity contribution, None when absent from the vector list",
    )
    lexical_score: float | None = Field(
        default=None,
        description="Raw lexical relevance, None when absent from the lexical list",
    )
    vector_id: str | None = Field(
        default=None,
        description="Composite id of the vector hit that supplied the similarity",
    )


class SearchResultItem(BaseModel):
    """Search result as returned to API clients."""

    text: str
    score: float


class SearchResponse(BaseModel):
    """Search API response."""

    results: list[SearchResultItem]
