"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory SQLite async engine, in-memory collaborators, sample chunks
Dependencies: pytest, pytest_asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import pytest
import pytest_asyncio

from chunk_search.boundary.db.memory_store import InMemoryLexicalStore
from chunk_search.boundary.embeddings.fake_provider import HashingEmbeddingProvider
from chunk_search.boundary.vdb.memory_store import InMemoryVectorStore
from chunk_search.configs.search import SearchSettings
from chunk_search.models.chunk import Chunk


@pytest_asyncio.fixture
async def sqlite_engine():
    """
    Create in-memory SQLite async engine with the schema created.

    StaticPool keeps a single connection so every session sees the same database.

    Yields:
        AsyncEngine: Test engine (disposed on teardown)
    """
    from sqlalchemy.ext.asyncio import create_async_engine
    from sqlalchemy.pool import StaticPool
    from chunk_search.boundary.db.base import Base

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_async_db(sqlite_engine):
    """
    Create async session bound to the in-memory SQLite engine.

    Yields:
        AsyncSession: Test database session
    """
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

    async_session = async_sessionmaker(
        sqlite_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()


@pytest.fixture
def embedder() -> HashingEmbeddingProvider:
    """Deterministic offline embedder."""
    return HashingEmbeddingProvider(dimension=32)


@pytest.fixture
def vector_store() -> InMemoryVectorStore:
    """Empty in-memory vector store (cosine)."""
    return InMemoryVectorStore(distance_metric="cosine")


@pytest.fixture
def lexical_store() -> InMemoryLexicalStore:
    """Empty in-memory lexical store."""
    return InMemoryLexicalStore()


@pytest.fixture
def search_settings() -> SearchSettings:
    """Search settings with the stock defaults, independent of the environment."""
    return SearchSettings(
        default_limit=10,
        default_breadth=100,
        default_lexical_weight=0.4,
        max_limit=100,
        max_breadth=1000,
        merge_key="text",
    )


@pytest.fixture
def sample_chunks() -> list[Chunk]:
    """Three consecutive chunks from one source."""
    return [
        Chunk(text="Postgres stores the lexical copy", url="https://docs.example.com/a", index=0),
        Chunk(text="Chroma stores the embeddings", url="https://docs.example.com/a", index=1),
        Chunk(text="Hybrid search fuses both lists", url="https://docs.example.com/a", index=2),
    ]
