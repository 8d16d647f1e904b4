"""Shared utilities: logging setup and request-scoped log context. No business logic."""
