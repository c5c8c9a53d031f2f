"""Error taxonomy for documentation lookups.

Every error carries a stable machine-readable ``code`` next to its
human-readable message. The MCP layer translates these into FastMCP
tool/resource/prompt errors so clients see a failed-operation response.
"""

from __future__ import annotations


class DocsError(Exception):
    """Base class for documentation service failures."""

    code = "docs_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class EntryNotFoundError(DocsError):
    """No catalog entry for the requested id or URI."""

    code = "not_found"

    def __init__(self, entry_id: str) -> None:
        super().__init__(f"Documentation section {entry_id} not found")
        self.entry_id = entry_id


class UnknownToolError(DocsError):
    code = "unknown_tool"

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class UnknownPromptError(DocsError):
    code = "unknown_prompt"

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown prompt: {name}")
        self.name = name


class MissingArgumentError(DocsError):
    """A required tool argument is absent or empty."""

    code = "missing_argument"

    def __init__(self, argument: str, message: str | None = None) -> None:
        super().__init__(message or f"Argument '{argument}' is required")
        self.argument = argument


class CatalogError(DocsError):
    """Catalog or prompt data could not be loaded or failed validation."""

    code = "invalid_catalog"
