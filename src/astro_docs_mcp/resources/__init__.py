"""MCP resource registrations."""

from . import doc_sections

__all__ = ["doc_sections"]
