"""Plain-text formatter for documentation sections.

Formatting is shared by resource reads, prompt composition and the
search_docs tool so every surface renders an entry the same way.
"""

from astro_docs_mcp.knowledge.config import SEARCH_SNIPPET_LENGTH, URI_SCHEME
from astro_docs_mcp.knowledge.models import Entry


class DocFormatter:
    """Format catalog entries as text for MCP clients."""

    @staticmethod
    def resource_uri(entry_id: str) -> str:
        return f"{URI_SCHEME}:///{entry_id}"

    @staticmethod
    def resource_description(entry: Entry) -> str:
        return f"Astro documentation: {entry.title} ({entry.category})"

    @staticmethod
    def format_entry(entry: Entry, link: str) -> str:
        """Render an entry as heading, body and "see more" line.

        Args:
            entry: Catalog entry
            link: Full external URL (base URL + entry path)
        """
        return f"# {entry.title}\n\n{entry.content}\n\nFor more details, see: {link}"

    @staticmethod
    def format_no_results(query: str) -> str:
        return f'No documentation found for query: "{query}"'

    @staticmethod
    def format_search_results(query: str, entries: list[Entry]) -> str:
        """Render search hits as a digest with a count header.

        Each hit shows its title, the first 100 characters of its content
        and its resource URI.
        """
        if not entries:
            return DocFormatter.format_no_results(query)

        lines = [
            f"- {entry.title}: {entry.content[:SEARCH_SNIPPET_LENGTH]}... "
            f"(URI: {DocFormatter.resource_uri(entry.id)})"
            for entry in entries
        ]
        header = f'Found {len(entries)} documentation sections for "{query}":'
        return header + "\n\n" + "\n\n".join(lines)
