"""Boundary adapters: embedding provider, vector store, lexical store."""
