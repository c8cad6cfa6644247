"""
Request parsing and error mapping helpers.

Query and body values are parsed here rather than by FastAPI so that
malformed input surfaces as a 400 ErrorResponse instead of a 422.

Dependencies: fastapi, pydantic, chunk_search.core.exceptions
System role: HTTP input validation and error translation
"""

import logging
from typing import Any

from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from chunk_search.core.exceptions import (
    ChunkSearchException,
    EmbeddingError,
    StoreError,
    ValidationError,
)
from chunk_search.models.chunk import Chunk
from chunk_search.models.common import ErrorResponse

logger = logging.getLogger(__name__)

# Checked in order; first match wins
STATUS_CODES: tuple[tuple[type[ChunkSearchException], int], ...] = (
    (ValidationError, 400),
    (EmbeddingError, 502),
    (StoreError, 503),
)


def status_code_for(exc: ChunkSearchException) -> int:
    """Map a domain exception to its HTTP status code."""
    for exc_type, status_code in STATUS_CODES:
        if isinstance(exc, exc_type):
            return status_code
    return 500


def error_response(exc: ChunkSearchException) -> JSONResponse:
    """Build the JSON error envelope for a domain exception."""
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.warning(
            "Request failed",
            extra={"status_code": status_code, "error_type": type(exc).__name__},
        )
    body = ErrorResponse(error=exc.message, details=exc.details or None)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def parse_chunks(payload: Any) -> list[Chunk]:
    """
    Parse a request body into chunks.

    Args:
        payload: Decoded JSON body, expected to be a non-empty array of objects

    Raises:
        ValidationError: If the body is not an array of chunk objects
    """
    if not isinstance(payload, list) or not payload:
        raise ValidationError("Array of chunks is required", field="chunks")

    chunks: list[Chunk] = []
    for position, item in enumerate(payload):
        if not isinstance(item, dict):
            raise ValidationError(
                "Each chunk must be an object",
                field=f"chunks[{position}]",
            )
        try:
            chunks.append(Chunk.model_validate(item))
        except PydanticValidationError as e:
            raise ValidationError(
                "Invalid chunk",
                field=f"chunks[{position}]",
                details={"errors": [error["msg"] for error in e.errors()]},
            ) from e
    return chunks


def parse_int_param(value: str | None, field: str) -> int | None:
    """
    Parse an optional integer query parameter.

    Returns:
        int | None: None when the parameter is absent or empty

    Raises:
        ValidationError: If the value is not an integer
    """
    if value is None or value.strip() == "":
        return None
    try:
        return int(value)
    except ValueError:
        raise ValidationError(
            f"{field} must be an integer",
            field=field,
            details={"value": value},
        ) from None


def parse_float_param(value: str | None, field: str) -> float | None:
    """
    Parse an optional numeric query parameter.

    Raises:
        ValidationError: If the value is not a number
    """
    if value is None or value.strip() == "":
        return None
    try:
        return float(value)
    except ValueError:
        raise ValidationError(
            f"{field} must be a number",
            field=field,
            details={"value": value},
        ) from None
