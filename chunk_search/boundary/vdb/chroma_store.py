"""
Chroma vector store adapter.

Talks to a Chroma server through the async HTTP client. Embeddings are
always computed by the caller, so the collection is created without an
embedding function.

Dependencies: chromadb, chunk_search.core.exceptions
System role: Production vector store for semantic retrieval
"""

import logging
from typing import Any

import chromadb

from chunk_search.boundary.vdb.vector_schemas import (
    VectorHit,
    VectorMetadata,
    VectorRecord,
)
from chunk_search.core.exceptions import VectorStoreError

logger = logging.getLogger(__name__)


class ChromaVectorStore:
    """
    Chroma-backed vector store.

    Upserts chunk embeddings keyed by composite id and answers
    nearest-neighbour queries with distances and metadata.
    """

    def __init__(
        self,
        host: str = "localhost",
        port: int = 8000,
        ssl: bool = False,
        collection_name: str = "text_embeddings",
        distance_metric: str = "cosine",
        client: Any | None = None,
    ) -> None:
        """
        Initialize the adapter. No network I/O happens until start().

        Args:
            host: Chroma server host
            port: Chroma server port
            ssl: Use HTTPS
            collection_name: Collection holding chunk embeddings
            distance_metric: HNSW space (cosine, l2, ip)
            client: Pre-built async client (tests, custom auth)
        """
        self.host = host
        self.port = port
        self.ssl = ssl
        self.collection_name = collection_name
        self.distance_metric = distance_metric
        self._client = client
        self._collection: Any | None = None

    async def start(self) -> None:
        """
        Connect to Chroma and ensure the collection exists.

        Raises:
            VectorStoreError: If the server is unreachable or the collection cannot be created
        """
        try:
            if self._client is None:
                self._client = await chromadb.AsyncHttpClient(
                    host=self.host,
                    port=self.port,
                    ssl=self.ssl,
                )
            self._collection = await self._client.get_or_create_collection(
                name=self.collection_name,
                embedding_function=None,
                metadata={"hnsw:space": self.distance_metric},
            )
        except Exception as e:
            raise VectorStoreError(
                message=f"Failed to open Chroma collection: {e}",
                operation="start",
                details={"host": self.host, "port": self.port, "collection": self.collection_name},
            ) from e

        logger.info(
            "Chroma collection ready",
            extra={"collection": self.collection_name, "distance_metric": self.distance_metric},
        )

    async def stop(self) -> None:
        """Drop the collection handle and client."""
        self._collection = None
        self._client = None

    def _require_collection(self, operation: str) -> Any:
        if self._collection is None:
            raise VectorStoreError(
                message="No collection initialized. Call `start` first.",
                operation=operation,
            )
        return self._collection

    async def upsert(self, record: VectorRecord) -> None:
        """
        Insert or overwrite a chunk embedding.

        Args:
            record: Vector record keyed by composite id

        Raises:
            VectorStoreError: If the upsert fails
        """
        collection = self._require_collection("upsert")
        try:
            await collection.upsert(
                ids=[record.id],
                embeddings=[record.embedding],
                metadatas=[record.metadata.model_dump()],
                documents=[record.metadata.text],
            )
        except Exception as e:
            raise VectorStoreError(
                message=f"Failed to upsert vector: {e}",
                operation="upsert",
                details={"id": record.id},
            ) from e

    async def query(self, embedding: list[float], top_k: int) -> list[VectorHit]:
        """
        Query nearest neighbours.

        Args:
            embedding: Query embedding
            top_k: Maximum number of hits

        Returns:
            list[VectorHit]: Hits ordered by ascending distance

        Raises:
            VectorStoreError: If the query fails
        """
        collection = self._require_collection("query")
        try:
            result = await collection.query(
                query_embeddings=[embedding],
                n_results=top_k,
                include=["metadatas", "documents", "distances"],
            )
        except Exception as e:
            raise VectorStoreError(
                message=f"Failed to query vectors: {e}",
                operation="query",
                details={"top_k": top_k},
            ) from e
        return parse_query_result(result)

    async def count(self) -> int:
        collection = self._require_collection("count")
        try:
            return await collection.count()
        except Exception as e:
            raise VectorStoreError(message=f"Failed to count vectors: {e}", operation="count") from e

    async def get(self, record_id: str) -> VectorRecord | None:
        collection = self._require_collection("get")
        try:
            result = await collection.get(ids=[record_id], include=["metadatas", "embeddings"])
        except Exception as e:
            raise VectorStoreError(
                message=f"Failed to fetch vector: {e}",
                operation="get",
                details={"id": record_id},
            ) from e

        ids = result.get("ids") or []
        if not ids:
            return None
        embeddings = result.get("embeddings")
        metadatas = result.get("metadatas") or [{}]
        embedding = embeddings[0] if embeddings is not None and len(embeddings) else []
        return VectorRecord(
            id=ids[0],
            embedding=[float(value) for value in embedding],
            metadata=VectorMetadata(**metadatas[0]),
        )


def _first_row(result: dict[str, Any], key: str) -> list[Any]:
    """Chroma returns one row per query embedding; only one is ever sent."""
    rows = result.get(key)
    if not rows:
        return []
    return list(rows[0] or [])


def parse_query_result(result: dict[str, Any]) -> list[VectorHit]:
    """
    Convert Chroma's column-major query response into hits.

    Missing distances or metadata entries yield hits with ``distance=None``
    or empty text rather than failing the whole query.
    """
    ids = _first_row(result, "ids")
    distances = _first_row(result, "distances")
    metadatas = _first_row(result, "metadatas")
    documents = _first_row(result, "documents")

    hits = []
    for position, vector_id in enumerate(ids):
        distance = distances[position] if position < len(distances) else None
        metadata = (metadatas[position] if position < len(metadatas) else None) or {}
        document = documents[position] if position < len(documents) else None
        hits.append(
            VectorHit(
                id=vector_id,
                distance=None if distance is None else float(distance),
                text=metadata.get("text") or document or "",
                url=metadata.get("url"),
                index=metadata.get("index"),
            )
        )
    return hits
