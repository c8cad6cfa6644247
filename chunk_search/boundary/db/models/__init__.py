"""ORM models."""

from chunk_search.boundary.db.models.stored_text_model import StoredTextModel

__all__ = ["StoredTextModel"]
