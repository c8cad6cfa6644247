"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from chunk_search.boundary.db.CRUD import stored_text_crud

    inserted = await stored_text_crud.insert_if_absent(db, text="...")
"""

from chunk_search.boundary.db.CRUD.base_crud import BaseCRUD
from chunk_search.boundary.db.CRUD.stored_text_crud import StoredTextCRUD, stored_text_crud

__all__ = [
    "BaseCRUD",
    "StoredTextCRUD",
    "stored_text_crud",
]
