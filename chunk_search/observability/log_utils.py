"""
Log-safe rendering of chunk search values.

Chunk texts, queries and embedding vectors go into log records as short
summaries so a 3072-dim vector or a multi-kilobyte chunk never lands in
a log line verbatim.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from numbers import Real
from typing import Any

TEXT_PREVIEW_LENGTH = 80


def summarize_text(text: str, max_length: int = TEXT_PREVIEW_LENGTH) -> str:
    """Single-line preview of a chunk text or query, with its full length."""
    flat = " ".join(text.split())
    if len(flat) <= max_length:
        return repr(flat)
    return f"{flat[:max_length]!r}... ({len(text)} chars)"


def safe_log_value(value: Any) -> Any:
    """
    Render a value for the ``extra`` dict of a log record.

    Numbers and None pass through; strings become previews; a list of
    numbers is treated as an embedding and reduced to its dimension.

    Args:
        value: Value to render

    Returns:
        Loggable value
    """
    if value is None or isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, str):
        return summarize_text(value)
    if isinstance(value, (list, tuple)):
        if value and all(isinstance(item, Real) for item in value):
            return f"vector(dim={len(value)})"
        return f"{type(value).__name__}({len(value)} items)"
    return summarize_text(str(value))


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context,
) -> None:
    """
    Log an error with its traceback and safe context.

    Works both inside and outside an ``except`` block: the traceback is
    taken from ``exc`` itself.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception being reported
        **context: Additional context (rendered with safe_log_value)
    """
    safe_context = {key: safe_log_value(val) for key, val in context.items()}
    safe_context.update(
        {
            "error_type": type(exc).__name__,
            "error_msg": getattr(exc, "message", None) or str(exc),
        }
    )
    logger.error(message, exc_info=exc, extra=safe_context)
