"""Astro docs MCP tool implementations."""

from . import search_docs

__all__ = [
    "search_docs",
]
