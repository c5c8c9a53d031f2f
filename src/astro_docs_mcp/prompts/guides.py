"""Curated Astro guide prompts built from documentation sections."""

from collections.abc import Callable

from fastmcp import FastMCP
from fastmcp.exceptions import PromptError
from mcp.types import EmbeddedResource, PromptMessage, TextContent, TextResourceContents

from astro_docs_mcp.errors import DocsError
from astro_docs_mcp.knowledge import Message
from astro_docs_mcp.service import DocsService


def register(mcp: FastMCP, service: DocsService) -> None:
    """Register every prompt template with the MCP server."""
    for item in service.list_prompts():
        mcp.prompt(name=item["name"], description=item["description"])(
            _renderer(service, item["name"])
        )


def to_prompt_message(message: Message) -> PromptMessage:
    """Convert a composed message to its MCP wire type."""
    if message.kind == "resource":
        content = EmbeddedResource(
            type="resource",
            resource=TextResourceContents(
                uri=message.uri,
                mimeType=message.mime_type,
                text=message.text,
            ),
        )
        return PromptMessage(role=message.role, content=content)
    return PromptMessage(role=message.role, content=TextContent(type="text", text=message.text))


def _renderer(service: DocsService, name: str) -> Callable[[], list[PromptMessage]]:
    def render() -> list[PromptMessage]:
        try:
            messages = service.get_prompt(name)
        except DocsError as exc:
            raise PromptError(str(exc)) from exc
        return [to_prompt_message(message) for message in messages]

    return render
