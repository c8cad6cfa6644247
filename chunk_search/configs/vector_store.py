"""
Vector store configuration settings.

Manages the Chroma connection and collection used for dense retrieval.

Dependencies: pydantic, pydantic_settings
System role: Vector database configuration for semantic retrieval
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class VectorStoreSettings(BaseSettings):
    """Vector store configuration (Chroma for prod, in-memory for local dev)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="VECTOR_STORE_",
        case_sensitive=False,
        extra="ignore",
    )

    store_type: Literal["chroma", "memory"] = Field(
        default="chroma",
        description="Vector store type: 'chroma' for a Chroma server, 'memory' for local dev",
    )
    chroma_host: str = Field(default="localhost", description="Chroma server host")
    chroma_port: int = Field(default=8000, description="Chroma server port")
    chroma_ssl: bool = Field(default=False, description="Use HTTPS for the Chroma server")
    collection_name: str = Field(
        default="text_embeddings",
        description="Chroma collection holding chunk embeddings",
    )
    distance_metric: Literal["cosine", "l2", "ip"] = Field(
        default="cosine",
        description="HNSW distance space; similarity is computed as 1 - distance",
    )
