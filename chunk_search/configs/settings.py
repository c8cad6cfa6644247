"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from chunk_search.configs.base import BaseSettings
from chunk_search.configs.database import DatabaseSettings
from chunk_search.configs.embedding import EmbeddingSettings
from chunk_search.configs.lexical_store import LexicalStoreSettings
from chunk_search.configs.search import SearchSettings
from chunk_search.configs.vector_store import VectorStoreSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    vector_store: VectorStoreSettings = Field(default_factory=VectorStoreSettings)
    lexical_store: LexicalStoreSettings = Field(default_factory=LexicalStoreSettings)
    embedding: EmbeddingSettings = Field(default_factory=EmbeddingSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from chunk_search.configs import get_settings
        settings = get_settings()
    """
    return Settings()
