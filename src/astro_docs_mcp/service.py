"""Query interface over the documentation catalog.

DocsService owns one Catalog and one PromptComposer and exposes every
operation the MCP layer serves. Tools and prompts are dispatched through
name -> handler maps, so an unknown name is a single lookup miss.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import Any
from urllib.parse import urlsplit

from astro_docs_mcp.errors import EntryNotFoundError, MissingArgumentError, UnknownToolError
from astro_docs_mcp.knowledge import (
    Catalog,
    CatalogLoader,
    DocFormatter,
    Entry,
    Message,
    PromptComposer,
    PromptTemplate,
)
from astro_docs_mcp.knowledge.config import MIME_TYPE, URI_SCHEME
from astro_docs_mcp.utils import QUERY_DESCRIPTION, coerce_query

logger = logging.getLogger("astro-docs-mcp.service")

ToolHandler = Callable[[Mapping[str, Any]], str]

# Single source for the search_docs descriptor; the FastMCP tool is built from it
SEARCH_DOCS_TOOL: dict[str, Any] = {
    "name": "search_docs",
    "description": (
        "Search Astro documentation. Returns one line per matching section "
        "with a short excerpt and its astro-docs:/// resource URI; read that "
        "resource for the full text."
    ),
    "inputSchema": {
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "description": QUERY_DESCRIPTION,
            }
        },
        "required": ["query"],
    },
}


class DocsService:
    """Read-only operations over an immutable catalog."""

    def __init__(self, catalog: Catalog, templates: Iterable[PromptTemplate]) -> None:
        self.catalog = catalog
        self.prompts = PromptComposer(catalog, templates)
        self._tools: dict[str, ToolHandler] = {
            "search_docs": self._search_docs,
        }
        self._tool_descriptors: dict[str, dict[str, Any]] = {
            "search_docs": SEARCH_DOCS_TOOL,
        }

    # -- catalog --------------------------------------------------------

    def list_entries(self) -> list[Entry]:
        return self.catalog.list()

    def get_entry(self, entry_id: str) -> Entry:
        return self.catalog.get(entry_id)

    def search(self, query: str) -> list[Entry]:
        return self.catalog.search(query)

    # -- resources ------------------------------------------------------

    def list_resources(self) -> list[dict[str, str]]:
        return [
            {
                "uri": DocFormatter.resource_uri(entry.id),
                "mimeType": MIME_TYPE,
                "name": entry.title,
                "description": DocFormatter.resource_description(entry),
            }
            for entry in self.catalog
        ]

    def resolve_uri(self, uri: str) -> Entry:
        """Map ``astro-docs:///<id>`` to its entry.

        Raises:
            EntryNotFoundError: wrong scheme, empty id or unknown id
        """
        parts = urlsplit(uri)
        entry_id = parts.path[1:] if parts.path.startswith("/") else parts.path
        if parts.scheme != URI_SCHEME or not entry_id:
            raise EntryNotFoundError(entry_id or uri)
        return self.catalog.get(entry_id)

    def render_entry(self, entry: Entry) -> str:
        return DocFormatter.format_entry(entry, self.catalog.link_for(entry))

    def read_resource(self, uri: str) -> dict[str, str]:
        entry = self.resolve_uri(uri)
        return {"uri": uri, "mimeType": MIME_TYPE, "text": self.render_entry(entry)}

    # -- tools ----------------------------------------------------------

    def list_tools(self) -> list[dict[str, Any]]:
        return list(self._tool_descriptors.values())

    def get_tool_descriptor(self, name: str) -> dict[str, Any]:
        descriptor = self._tool_descriptors.get(name)
        if descriptor is None:
            raise UnknownToolError(name)
        return descriptor

    def call_tool(self, name: str, arguments: Mapping[str, Any] | None = None) -> str:
        handler = self._tools.get(name)
        if handler is None:
            raise UnknownToolError(name)
        return handler(arguments or {})

    def _search_docs(self, arguments: Mapping[str, Any]) -> str:
        query = coerce_query(arguments.get("query"))
        if not query:
            raise MissingArgumentError("query", "Search query is required")

        results = self.catalog.search(query)
        logger.debug("search_docs %r matched %d sections", query, len(results))
        return DocFormatter.format_search_results(query, results)

    # -- prompts --------------------------------------------------------

    def list_prompts(self) -> list[dict[str, str]]:
        return self.prompts.list_prompts()

    def get_prompt(self, name: str) -> list[Message]:
        return self.prompts.get_prompt(name)


def build_service(
    catalog_path: Path | None = None,
    prompts_path: Path | None = None,
    base_url: str | None = None,
) -> DocsService:
    """Build a service from JSON data files (bundled data by default)."""
    catalog_kwargs: dict[str, Any] = {"base_url": base_url}
    if catalog_path is not None:
        catalog_kwargs["path"] = catalog_path
    catalog = CatalogLoader.load_catalog(**catalog_kwargs)
    templates = (
        CatalogLoader.load_prompts(prompts_path)
        if prompts_path is not None
        else CatalogLoader.load_prompts()
    )
    return DocsService(catalog, templates)
