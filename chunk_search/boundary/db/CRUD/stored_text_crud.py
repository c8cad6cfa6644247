"""
Stored text CRUD operations.

Insert-or-ignore writes, PostgreSQL full-text ranking, and the
url/index locality window read.

Dependencies: sqlalchemy, chunk_search.boundary.db.models
System role: Lexical store persistence operations
"""

from typing import Sequence

from sqlalchemy import cast, func, literal, select
from sqlalchemy.dialects.postgresql import REGCONFIG, insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from chunk_search.boundary.db.CRUD.base_crud import BaseCRUD
from chunk_search.boundary.db.models.stored_text_model import StoredTextModel


class StoredTextCRUD(BaseCRUD[StoredTextModel]):
    """
    CRUD operations for StoredTextModel.

    Extends BaseCRUD with idempotent inserts keyed on text content
    and the two read paths used by the service.
    """

    def __init__(self) -> None:
        """Initialize StoredTextCRUD with StoredTextModel."""
        super().__init__(StoredTextModel)

    async def insert_if_absent(
        self,
        session: AsyncSession,
        text: str,
        url: str | None = None,
        chunk_index: int | None = None,
    ) -> bool:
        """
        Insert a text row unless identical text already exists.

        Uses ON CONFLICT (text) DO NOTHING, so an existing row (and its
        first-seen url/index) is left untouched.

        Args:
            session: Async database session (caller commits)
            text: Chunk text
            url: Origin URL
            chunk_index: Chunk index within the origin

        Returns:
            True if a new row was inserted, False if the text already existed
        """
        dialect_name = session.get_bind().dialect.name
        insert = sqlite_insert if dialect_name == "sqlite" else pg_insert
        stmt = (
            insert(StoredTextModel)
            .values(text=text, url=url, chunk_index=chunk_index)
            .on_conflict_do_nothing(index_elements=["text"])
        )
        result = await session.execute(stmt)
        return result.rowcount > 0

    async def ranked_search(
        self,
        session: AsyncSession,
        query: str,
        top_k: int,
        text_search_config: str = "english",
    ) -> list[tuple[str, float]]:
        """
        Full-text search ranked by ts_rank_cd (PostgreSQL only).

        Args:
            session: Async database session
            query: Free-text query, parsed with plainto_tsquery
            top_k: Maximum number of rows
            text_search_config: PostgreSQL text search configuration name

        Returns:
            list of (text, score) ordered by descending score
        """
        config = cast(literal(text_search_config), REGCONFIG)
        document = func.to_tsvector(config, StoredTextModel.text)
        ts_query = func.plainto_tsquery(config, query)
        score = func.ts_rank_cd(document, ts_query).label("score")

        stmt = (
            select(StoredTextModel.text, score)
            .where(document.op("@@")(ts_query))
            .order_by(score.desc(), StoredTextModel.id)
            .limit(top_k)
        )
        result = await session.execute(stmt)
        return [(row.text, float(row.score)) for row in result.all()]

    async def fetch_range(
        self,
        session: AsyncSession,
        url: str,
        chunk_index: int,
        window: int = 2,
    ) -> Sequence[StoredTextModel]:
        """
        Retrieve rows of one url whose index lies within ``chunk_index ± window``.

        Args:
            session: Async database session
            url: Origin URL
            chunk_index: Centre of the window
            window: Half-width of the window

        Returns:
            Sequence of StoredTextModels ordered by chunk_index
        """
        stmt = (
            select(StoredTextModel)
            .where(StoredTextModel.url == url)
            .where(
                StoredTextModel.chunk_index.between(
                    chunk_index - window, chunk_index + window
                )
            )
            .order_by(StoredTextModel.chunk_index, StoredTextModel.id)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


stored_text_crud = StoredTextCRUD()
