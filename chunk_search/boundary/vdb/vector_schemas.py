"""
Vector database schemas.

Pydantic models for vector operations (records, metadata, hits).
Used for type-safe vector store interactions.

Dependencies: pydantic
System role: Type definitions for vector operations
"""

from pydantic import BaseModel, Field


class VectorMetadata(BaseModel):
    """Metadata stored alongside each chunk embedding."""

    text: str = Field(description="Chunk text content")
    url: str = Field(description="Origin URL of the chunk")
    index: int = Field(description="Position of the chunk within its source")


class VectorRecord(BaseModel):
    """A chunk embedding keyed by composite id."""

    id: str = Field(description="Composite id: url + '_' + index")
    embedding: list[float] = Field(description="Embedding vector")
    metadata: VectorMetadata


class VectorHit(BaseModel):
    """Single result from a vector similarity query."""

    id: str = Field(description="Composite id of the matched record")
    distance: float | None = Field(
        default=None,
        description="Distance reported by the store (ascending = closer); None if unreported",
    )
    text: str = Field(default="", description="Chunk text from the record metadata")
    url: str | None = Field(default=None, description="Origin URL from the record metadata")
    index: int | None = Field(default=None, description="Chunk index from the record metadata")
