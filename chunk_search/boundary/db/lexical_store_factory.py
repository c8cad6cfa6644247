"""
Lexical store factory for selecting between PostgreSQL (prod) and in-memory (dev).

Dependencies: chunk_search.boundary.db, chunk_search.configs
System role: Lexical store instantiation and selection
"""

import logging

from chunk_search.boundary.db.connection import get_async_engine
from chunk_search.boundary.db.lexical_store import LexicalStore
from chunk_search.boundary.db.memory_store import InMemoryLexicalStore
from chunk_search.boundary.db.postgres_store import PostgresLexicalStore
from chunk_search.configs.settings import Settings

logger = logging.getLogger(__name__)


def build_lexical_store(settings: Settings) -> LexicalStore:
    """
    Build the lexical store selected by configuration.

    Args:
        settings: Application settings (database + lexical store sections)

    Returns:
        LexicalStore: Unstarted store instance

    Raises:
        ValueError: If store_type is invalid
    """
    store_type = settings.lexical_store.store_type.lower()

    if store_type == "postgres":
        logger.info(f"{__name__}:build_lexical_store - Creating PostgreSQL lexical store")
        return PostgresLexicalStore(
            engine=get_async_engine(settings.database),
            text_search_config=settings.lexical_store.text_search_config,
        )

    elif store_type == "memory":
        logger.info(f"{__name__}:build_lexical_store - Creating in-memory lexical store (local dev mode)")
        return InMemoryLexicalStore()

    else:
        raise ValueError(
            f"Invalid lexical store type: {store_type}. "
            f"Must be 'postgres' or 'memory'."
        )
