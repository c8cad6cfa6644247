"""
Database table creation.

Creates all tables defined in ORM models using SQLAlchemy metadata.
Invoked explicitly during service startup.

Dependencies: sqlalchemy
System role: Database schema initialization
"""

from sqlalchemy.ext.asyncio import AsyncEngine

from chunk_search.boundary.db.base import Base

# Import all models to register them with Base.metadata
from chunk_search.boundary.db.models.stored_text_model import StoredTextModel  # noqa: F401


async def create_all_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: issues CREATE TABLE / CREATE INDEX only for objects that
    do not exist yet, so safe to run on every startup.

    Args:
        engine: Async engine for the target database

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

