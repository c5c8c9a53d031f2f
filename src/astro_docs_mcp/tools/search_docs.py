"""Astro Docs Search Tool - Substring search across documentation sections."""

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool

from astro_docs_mcp.errors import DocsError
from astro_docs_mcp.service import DocsService
from astro_docs_mcp.utils import SearchQuery


def register(mcp: FastMCP, service: DocsService) -> None:
    """Register search_docs tool with the MCP server.

    Name, description and input schema come from the service descriptor, so
    tools/list advertises exactly what DocsService.list_tools() reports.
    """
    descriptor = service.get_tool_descriptor("search_docs")

    def search_docs(query: SearchQuery = "") -> str:
        # A missing query defaults to "" and is rejected by the service
        try:
            return service.call_tool("search_docs", {"query": query})
        except DocsError as exc:
            raise ToolError(str(exc)) from exc

    tool = Tool.from_function(
        search_docs,
        name=descriptor["name"],
        description=descriptor["description"],
    )
    mcp.add_tool(tool.model_copy(update={"parameters": descriptor["inputSchema"]}))
