"""
Dependency injection container.

Builds the three external collaborators once per process, wires them into
the services, and exposes FastAPI dependency functions that read the
container from ``app.state``.

Dependencies: fastapi, chunk_search.configs, chunk_search.application, chunk_search.boundary
System role: DI container for service injection
"""

import logging

from fastapi import Depends, Request

from chunk_search.application.services import ChunkService, SearchService
from chunk_search.boundary.db.lexical_store import LexicalStore
from chunk_search.boundary.db.lexical_store_factory import build_lexical_store
from chunk_search.boundary.embeddings.base import EmbeddingProvider
from chunk_search.boundary.embeddings.factory import build_embedding_provider
from chunk_search.boundary.vdb.base import VectorStore
from chunk_search.boundary.vdb.vector_store_factory import build_vector_store
from chunk_search.configs import Settings
from chunk_search.core.ingestion import IngestionPipeline

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Container for process-wide collaborators and services.

    Collaborators not passed in are built from settings. Nothing connects
    until start() is awaited.
    """

    def __init__(
        self,
        settings: Settings,
        embedding_provider: EmbeddingProvider | None = None,
        vector_store: VectorStore | None = None,
        lexical_store: LexicalStore | None = None,
    ) -> None:
        self.settings = settings
        if embedding_provider is None:
            embedding_provider = build_embedding_provider(settings.embedding)
        if vector_store is None:
            vector_store = build_vector_store(settings.vector_store)
        if lexical_store is None:
            lexical_store = build_lexical_store(settings)

        self.embedding_provider = embedding_provider
        self.vector_store = vector_store
        self.lexical_store = lexical_store

        self.pipeline = IngestionPipeline(
            embedding_provider=embedding_provider,
            vector_store=vector_store,
            lexical_store=lexical_store,
        )
        self.chunk_service = ChunkService(
            pipeline=self.pipeline,
            lexical_store=lexical_store,
            range_window=settings.lexical_store.range_window,
        )
        self.search_service = SearchService(
            embedding_provider=embedding_provider,
            vector_store=vector_store,
            lexical_store=lexical_store,
            config=settings.search,
        )
        self._started = False

    @property
    def started(self) -> bool:
        return self._started

    async def start(self) -> None:
        """Connect the stores (schema bootstrap, vector collection)."""
        if self._started:
            return
        await self.lexical_store.start()
        try:
            await self.vector_store.start()
        except Exception:
            await self.lexical_store.stop()
            raise
        self._started = True
        logger.info(f"{__name__}:start - Service container started")

    async def stop(self) -> None:
        """Release store connections."""
        if not self._started:
            return
        try:
            await self.vector_store.stop()
        finally:
            await self.lexical_store.stop()
            self._started = False
        logger.info(f"{__name__}:stop - Service container stopped")


def get_service_container(request: Request) -> ServiceContainer:
    """
    Get the container created by the application lifespan.

    Raises:
        RuntimeError: If the application has not been started
    """
    container = getattr(request.app.state, "container", None)
    if container is None:
        raise RuntimeError("Service container is not initialised; was the lifespan run?")
    return container


def get_chunk_service(
    container: ServiceContainer = Depends(get_service_container),
) -> ChunkService:
    """
    Get chunk service instance.

    Args:
        container: Service container (injected via Depends)

    Returns:
        ChunkService: Ingestion and range fetch service
    """
    return container.chunk_service


def get_search_service(
    container: ServiceContainer = Depends(get_service_container),
) -> SearchService:
    """
    Get search service instance.

    Args:
        container: Service container (injected via Depends)

    Returns:
        SearchService: Hybrid search service
    """
    return container.search_service
