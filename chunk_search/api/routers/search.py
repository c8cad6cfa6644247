"""
Search API endpoint.

Routes:
- GET /search - Hybrid (vector + full-text) search

Dependencies: chunk_search.application.services.search_service, chunk_search.models
System role: Hybrid search HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Query

from chunk_search.api.deps import get_search_service
from chunk_search.api.routers.router_utils import (
    error_response,
    parse_float_param,
    parse_int_param,
)
from chunk_search.application.services.search_service import SearchService
from chunk_search.core.exceptions import ChunkSearchException
from chunk_search.models.common import ErrorResponse
from chunk_search.models.search import SearchResponse, SearchResultItem

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/search", tags=["search"])


@router.get(
    "",
    response_model=SearchResponse,
    responses={
        400: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def search(
    query: str | None = Query(default=None),
    limit: str | None = Query(default=None),
    search_breadth: str | None = Query(default=None, alias="searchBreadth"),
    lexical_weight: str | None = Query(default=None, alias="lexicalWeight"),
    search_service: SearchService = Depends(get_search_service),
):
    """
    Hybrid search.

    Args:
        query: Free-text query (required)
        limit: Maximum results (default from settings)
        search_breadth: Candidates per store (default from settings)
        lexical_weight: Lexical relevance multiplier in [0, 1]
        search_service: Injected SearchService

    Returns:
        SearchResponse: Ranked {text, score} results

    Raises:
        400: Missing query or invalid parameter
        502: Query embedding failed
        503: Store failure
    """
    try:
        hits = await search_service.search(
            query=query or "",
            limit=parse_int_param(limit, "limit"),
            search_breadth=parse_int_param(search_breadth, "searchBreadth"),
            lexical_weight=parse_float_param(lexical_weight, "lexicalWeight"),
        )
    except ChunkSearchException as e:
        return error_response(e)

    return SearchResponse(results=[SearchResultItem(text=hit.text, score=hit.score) for hit in hits])
