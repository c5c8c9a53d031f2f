"""MCP prompt registrations."""

from . import guides

__all__ = ["guides"]
