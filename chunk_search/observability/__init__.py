"""
Observability module.

Provides logging configuration, safe structured logging helpers,
and request/correlation middleware.
"""

from chunk_search.observability.logger import configure_logging

__all__ = ["configure_logging"]
