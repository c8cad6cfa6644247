"""
API test fixtures.

Provides an application wired to in-memory collaborators, started through
its real lifespan.

Dependencies: fastapi, pytest
System role: HTTP test infrastructure
"""

import pytest
from fastapi.testclient import TestClient

from chunk_search.api.deps import ServiceContainer
from chunk_search.api.main import create_app
from chunk_search.configs import Settings


@pytest.fixture
def container(embedder, vector_store, lexical_store, search_settings) -> ServiceContainer:
    """Provide service container over the in-memory collaborators."""
    settings = Settings(search=search_settings)
    return ServiceContainer(
        settings,
        embedding_provider=embedder,
        vector_store=vector_store,
        lexical_store=lexical_store,
    )


@pytest.fixture
def app(container):
    """Provide application using the in-memory container."""
    return create_app(settings=container.settings, container=container)


@pytest.fixture
def client(app):
    """Provide started test client (runs startup and shutdown)."""
    with TestClient(app) as test_client:
        yield test_client
