"""HTTP API: routers, dependency container and app factory."""
