"""
Search configuration settings.

Defaults applied when a search request omits its tuning parameters,
plus upper bounds protecting the stores from oversized requests.

Dependencies: pydantic, pydantic_settings
System role: Hybrid search tuning
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SearchSettings(BaseSettings):
    """Hybrid search defaults and limits."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SEARCH_",
        case_sensitive=False,
        extra="ignore",
    )

    default_limit: int = Field(default=10, gt=0, description="Results returned when limit is omitted")
    default_breadth: int = Field(
        default=100,
        gt=0,
        description="Candidates fetched from each store when searchBreadth is omitted",
    )
    default_lexical_weight: float = Field(
        default=0.4,
        ge=0.0,
        le=1.0,
        description="Weight applied to lexical relevance when lexicalWeight is omitted",
    )
    max_limit: int = Field(default=100, gt=0, description="Largest accepted result limit")
    max_breadth: int = Field(default=1000, gt=0, description="Largest accepted search breadth")
    merge_key: Literal["text", "normalized_text"] = Field(
        default="text",
        description="Key used to merge vector and lexical hits",
    )
