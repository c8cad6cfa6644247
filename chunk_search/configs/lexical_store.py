"""
Lexical store configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Full-text store configuration
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LexicalStoreSettings(BaseSettings):
    """Lexical (full-text) store configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="LEXICAL_STORE_",
        case_sensitive=False,
        extra="ignore",
    )

    store_type: Literal["postgres", "memory"] = Field(
        default="postgres",
        description="Lexical store type: 'postgres' for full-text search, 'memory' for local dev",
    )
    text_search_config: str = Field(
        default="english",
        description="PostgreSQL text search configuration passed to to_tsvector/plainto_tsquery",
    )
    range_window: int = Field(
        default=2,
        ge=0,
        description="Half-width of the index window returned by range fetch",
    )
