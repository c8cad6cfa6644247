"""
Chunk domain model and ingestion schemas.

A chunk is a unit of source text with its origin url and positional index.
Its vector-domain identity is the composite id ``{url}_{index}``.

Dependencies: pydantic
System role: Data structures for chunk ingestion and range fetch
"""

from pydantic import BaseModel, Field


def make_composite_id(url: str, index: int) -> str:
    """Build the vector-store identity for a (url, index) pair."""
    return f"{url}_{index}"


class Chunk(BaseModel):
    """
    Incoming chunk of text.

    Fields are optional at the schema level so that the ingestion pipeline
    can report missing or empty values with the offending chunk position.
    """

    text: str | None = Field(default=None, description="Chunk text content")
    url: str | None = Field(default=None, description="Origin URL of the chunk")
    index: int | None = Field(
        default=None,
        strict=True,
        description="Position of the chunk within its source",
    )

    @property
    def composite_id(self) -> str:
        """Vector-store identity for this chunk."""
        return make_composite_id(self.url, self.index)


class IngestionResult(BaseModel):
    """Outcome of a fully committed ingestion batch."""

    count: int = Field(description="Number of chunks processed")
    composite_ids: list[str] = Field(
        default_factory=list,
        description="Composite ids upserted into the vector store, in input order",
    )
    new_lexical_rows: int = Field(
        default=0,
        description="Lexical rows actually inserted (duplicates are ignored)",
    )


class IngestResponse(BaseModel):
    """Response schema for chunk ingestion."""

    success: bool = True
    message: str = "Chunks stored successfully"
    count: int = Field(description="Number of chunks processed")


class ChunkRangeItem(BaseModel):
    """A lexical-store row returned by range fetch."""

    text: str
    url: str | None = None
    index: int | None = None


class ChunkRangeResponse(BaseModel):
    """Range fetch response."""

    chunks: list[ChunkRangeItem]
