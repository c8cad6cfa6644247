"""Dual-write ingestion of chunks into the vector and lexical stores."""

from chunk_search.core.ingestion.pipeline import IngestionPipeline, validate_chunks

__all__ = ["IngestionPipeline", "validate_chunks"]
