"""
Chunk API endpoints.

Routes:
- POST /chunks - Ingest a batch of chunks into both stores
- GET /chunks - Fetch stored texts around a (url, index) position

Dependencies: chunk_search.application.services.chunk_service, chunk_search.models
System role: Chunk ingestion and range fetch HTTP API
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Query

from chunk_search.api.deps import get_chunk_service
from chunk_search.api.routers.router_utils import (
    error_response,
    parse_chunks,
    parse_int_param,
)
from chunk_search.application.services.chunk_service import ChunkService
from chunk_search.core.exceptions import ChunkSearchException, ValidationError
from chunk_search.models.chunk import ChunkRangeItem, ChunkRangeResponse, IngestResponse
from chunk_search.models.common import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chunks", tags=["chunks"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    502: {"model": ErrorResponse},
    503: {"model": ErrorResponse},
}


@router.post("", response_model=IngestResponse, responses=ERROR_RESPONSES)
async def ingest_chunks(
    payload: Any = Body(default=None),
    chunk_service: ChunkService = Depends(get_chunk_service),
):
    """
    Ingest chunks.

    Args:
        payload: JSON array of {text, url, index}
        chunk_service: Injected ChunkService

    Returns:
        IngestResponse: Number of chunks processed

    Raises:
        400: Malformed batch (nothing written)
        502: Embedding provider failure
        503: Store failure (earlier chunks stay committed)
    """
    try:
        chunks = parse_chunks(payload)
        result = await chunk_service.ingest(chunks)
    except ChunkSearchException as e:
        return error_response(e)

    return IngestResponse(count=result.count)


@router.get("", response_model=ChunkRangeResponse, responses=ERROR_RESPONSES)
async def get_chunk_range(
    url: str | None = Query(default=None),
    index: str | None = Query(default=None),
    chunk_service: ChunkService = Depends(get_chunk_service),
):
    """
    Fetch stored texts whose origin is within the range window of (url, index).

    Raises:
        400: Missing url or non-integer index
        503: Lexical store failure
    """
    try:
        chunk_index = parse_int_param(index, "index")
        if not url or chunk_index is None:
            raise ValidationError("Valid url and index are required", field="url" if not url else "index")
        rows = await chunk_service.fetch_range(url, chunk_index)
    except ChunkSearchException as e:
        return error_response(e)

    return ChunkRangeResponse(
        chunks=[ChunkRangeItem(text=row.text, url=row.url, index=row.index) for row in rows]
    )
