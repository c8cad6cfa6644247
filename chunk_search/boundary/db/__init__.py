"""
Database boundary layer: ORM model, CRUD operations, connection management,
and the lexical store adapters built on them.

Exports:
  - Base, IntegerIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(): Async connection management
  - StoredTextModel, stored_text_crud: Lexical table and its operations
  - LexicalStore, PostgresLexicalStore, InMemoryLexicalStore: Store adapters

Dependencies: sqlalchemy, chunk_search.configs
System role: Lexical store adapter providing persistent full-text storage
"""

from chunk_search.boundary.db.base import Base, IntegerIDMixin, TimestampMixin
from chunk_search.boundary.db.connection import get_async_engine, get_async_session_factory
from chunk_search.boundary.db.CRUD import BaseCRUD, StoredTextCRUD, stored_text_crud
from chunk_search.boundary.db.lexical_schemas import LexicalHit, StoredText
from chunk_search.boundary.db.lexical_store import LexicalStore
from chunk_search.boundary.db.memory_store import InMemoryLexicalStore
from chunk_search.boundary.db.models import StoredTextModel
from chunk_search.boundary.db.postgres_store import PostgresLexicalStore

__all__ = [
    # Base classes
    "Base",
    "IntegerIDMixin",
    "TimestampMixin",
    # Connection
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "StoredTextModel",
    # CRUD
    "BaseCRUD",
    "StoredTextCRUD",
    "stored_text_crud",
    # Stores
    "LexicalHit",
    "LexicalStore",
    "InMemoryLexicalStore",
    "PostgresLexicalStore",
    "StoredText",
]
