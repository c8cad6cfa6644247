"""
Lexical store schemas.

Dependencies: pydantic
System role: Type definitions for lexical store results
"""

from pydantic import BaseModel, Field


class LexicalHit(BaseModel):
    """Single result from a full-text relevance query."""

    text: str = Field(description="Stored chunk text")
    score: float = Field(description="Relevance score as reported by the store (unnormalized)")


class StoredText(BaseModel):
    """A lexical-store row as exposed outside the ORM layer."""

    text: str
    url: str | None = None
    index: int | None = None
