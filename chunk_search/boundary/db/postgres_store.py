"""
PostgreSQL lexical store.

Every call runs in its own session and commits on its own; there is
no transaction spanning an ingestion batch. Driver-level connection
failures are translated alongside SQLAlchemy errors.

Dependencies: sqlalchemy, asyncpg, chunk_search.boundary.db.CRUD
System role: Production lexical store (full-text search)
"""

import asyncio
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from chunk_search.boundary.db.connection import get_async_session_factory
from chunk_search.boundary.db.create_tables import create_all_tables
from chunk_search.boundary.db.CRUD.stored_text_crud import stored_text_crud
from chunk_search.boundary.db.lexical_schemas import LexicalHit, StoredText
from chunk_search.core.exceptions import LexicalStoreError

logger = logging.getLogger(__name__)

# asyncpg connect failures and timeouts are not wrapped by SQLAlchemy
DATABASE_ERRORS = (SQLAlchemyError, OSError, TimeoutError, asyncio.TimeoutError)


class PostgresLexicalStore:
    """
    Lexical store backed by the ``stored_texts`` table.

    Owns the engine it is given: start() bootstraps the schema,
    stop() disposes the connection pool.
    """

    def __init__(
        self,
        engine: AsyncEngine,
        text_search_config: str = "english",
        create_schema: bool = True,
    ) -> None:
        """
        Initialize the store.

        Args:
            engine: Async engine (asyncpg)
            text_search_config: PostgreSQL text search configuration
            create_schema: Run idempotent table creation on start()
        """
        self.engine = engine
        self.text_search_config = text_search_config
        self.create_schema = create_schema
        self._session_factory: async_sessionmaker = get_async_session_factory(engine)

    async def start(self) -> None:
        if not self.create_schema:
            return
        try:
            await create_all_tables(self.engine)
        except DATABASE_ERRORS as e:
            raise LexicalStoreError(
                message=f"Failed to bootstrap lexical schema: {e}",
                operation="start",
            ) from e
        logger.info("Lexical store schema ensured")

    async def stop(self) -> None:
        await self.engine.dispose()

    async def insert_if_absent(
        self,
        text: str,
        url: str | None = None,
        index: int | None = None,
    ) -> bool:
        """
        Insert text unless an identical row exists, committing immediately.

        Raises:
            LexicalStoreError: If the insert or commit fails
        """
        try:
            async with self._session_factory() as session:
                inserted = await stored_text_crud.insert_if_absent(
                    session, text=text, url=url, chunk_index=index
                )
                await session.commit()
        except DATABASE_ERRORS as e:
            raise LexicalStoreError(
                message=f"Failed to insert text: {e}",
                operation="insert",
                details={"url": url, "index": index},
            ) from e
        return inserted

    async def ranked_search(self, query: str, top_k: int) -> list[LexicalHit]:
        """
        Rank stored texts against a query with ts_rank_cd.

        Raises:
            LexicalStoreError: If the query fails
        """
        try:
            async with self._session_factory() as session:
                rows = await stored_text_crud.ranked_search(
                    session,
                    query=query,
                    top_k=top_k,
                    text_search_config=self.text_search_config,
                )
        except DATABASE_ERRORS as e:
            raise LexicalStoreError(
                message=f"Failed to run full-text search: {e}",
                operation="search",
                details={"top_k": top_k},
            ) from e
        return [LexicalHit(text=text, score=score) for text, score in rows]

    async def fetch_range(self, url: str, index: int, window: int) -> list[StoredText]:
        """
        Read the locality window around (url, index).

        Raises:
            LexicalStoreError: If the query fails
        """
        try:
            async with self._session_factory() as session:
                rows = await stored_text_crud.fetch_range(
                    session, url=url, chunk_index=index, window=window
                )
        except DATABASE_ERRORS as e:
            raise LexicalStoreError(
                message=f"Failed to fetch chunk range: {e}",
                operation="fetch_range",
                details={"url": url, "index": index},
            ) from e
        return [StoredText(text=row.text, url=row.url, index=row.chunk_index) for row in rows]

    async def count(self) -> int:
        try:
            async with self._session_factory() as session:
                return await stored_text_crud.count(session)
        except DATABASE_ERRORS as e:
            raise LexicalStoreError(message=f"Failed to count rows: {e}", operation="count") from e
