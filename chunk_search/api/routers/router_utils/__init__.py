"""
Router utility functions.

Contains helper functions extracted from router endpoints to keep them clean.
"""

from chunk_search.api.routers.router_utils.request_utils import (
    error_response,
    parse_chunks,
    parse_float_param,
    parse_int_param,
    status_code_for,
)

__all__ = [
    "error_response",
    "parse_chunks",
    "parse_float_param",
    "parse_int_param",
    "status_code_for",
]
