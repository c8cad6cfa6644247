"""
Embedding provider configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Embedding model selection
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EmbeddingSettings(BaseSettings):
    """Embedding model configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="EMBEDDING_",
        case_sensitive=False,
        extra="ignore",
    )

    provider: Literal["google", "openai", "fake"] = Field(
        default="openai",
        description="Embedding backend: 'google' (Gemini), 'openai', or 'fake' (offline hashing)",
    )
    model: str = Field(
        default="text-embedding-3-large",
        description="Provider model ID (e.g. text-embedding-3-large, models/gemini-embedding-001)",
    )
    dimension: int = Field(
        default=3072,
        gt=0,
        description="Embedding vector dimension, fixed for the lifetime of a deployment",
    )
    api_key: str | None = Field(
        default=None,
        description="Provider API key; falls back to the SDK's own environment variable",
    )
