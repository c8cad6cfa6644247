"""
Stored text ORM model.

One row per distinct literal chunk text across the whole corpus.

Dependencies: sqlalchemy, chunk_search.boundary.db.base
System role: Lexical store persistence for full-text search
"""

from sqlalchemy import Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from chunk_search.boundary.db.base import Base, IntegerIDMixin, TimestampMixin


class StoredTextModel(Base, IntegerIDMixin, TimestampMixin):
    """
    Stored text ORM model.

    ``text`` is globally unique: the same literal text ingested under
    several urls/indexes is stored once. ``url`` and ``chunk_index`` record
    where that text was first seen and are never overwritten. The unique
    constraint is the only index on ``text``; PostgreSQL btree entries cap
    a single text at roughly 2.7 KB.

    Attributes:
        id: Integer primary key
        text: Chunk text, unique across the corpus
        url: Origin URL of the first ingestion (nullable)
        chunk_index: Chunk index of the first ingestion (nullable)
        created_at: Row creation timestamp (UTC)
    """

    __tablename__ = "stored_texts"
    __table_args__ = (
        Index("ix_stored_texts_url_chunk_index", "url", "chunk_index"),
    )

    text: Mapped[str] = mapped_column(
        Text,
        unique=True,
        nullable=False,
        doc="Chunk text content",
    )
    url: Mapped[str | None] = mapped_column(
        String(2048),
        nullable=True,
        doc="Origin URL of the first ingestion of this text",
    )
    chunk_index: Mapped[int | None] = mapped_column(
        Integer,
        nullable=True,
        doc="Chunk index of the first ingestion of this text",
    )
