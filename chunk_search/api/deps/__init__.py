"""API dependencies."""

from chunk_search.api.deps.dependencies import (
    ServiceContainer,
    get_chunk_service,
    get_search_service,
    get_service_container,
)

__all__ = [
    "ServiceContainer",
    "get_chunk_service",
    "get_search_service",
    "get_service_container",
]
