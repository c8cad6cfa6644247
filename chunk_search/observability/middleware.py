"""
Request context middleware.

Binds a correlation ID to each request and writes one access line per
request once the response status is known.

Dependencies: fastapi, chunk_search.observability
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from chunk_search.observability.correlation import (
    clear_correlation_id,
    set_correlation_id,
)
from chunk_search.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Correlation ID propagation and access logging for the API."""

    async def dispatch(self, request: Request, call_next) -> Response:
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        start_time = time.perf_counter()
        route = f"{request.method} {request.url.path}"
        try:
            response: Response = await call_next(request)
        except Exception as e:
            # Unmapped errors only; domain errors are already answered by the routers
            log_exception_with_context(
                logger,
                f"{route} - unhandled error",
                e,
                elapsed_ms=round((time.perf_counter() - start_time) * 1000, 2),
            )
            raise
        finally:
            clear_correlation_id()

        elapsed_ms = round((time.perf_counter() - start_time) * 1000, 2)
        logger.log(
            logging.WARNING if response.status_code >= 500 else logging.INFO,
            f"{route} - {response.status_code} ({elapsed_ms} ms)",
            extra={"status_code": response.status_code, "elapsed_ms": elapsed_ms},
        )
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
