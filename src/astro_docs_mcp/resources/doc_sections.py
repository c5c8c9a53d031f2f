"""Documentation sections exposed as astro-docs:/// resources."""

from collections.abc import Callable

from fastmcp import FastMCP
from fastmcp.exceptions import ResourceError

from astro_docs_mcp.errors import DocsError
from astro_docs_mcp.knowledge.config import MIME_TYPE, URI_SCHEME
from astro_docs_mcp.service import DocsService


def register(mcp: FastMCP, service: DocsService) -> None:
    """Register one resource per catalog entry plus a lookup template.

    Concrete resources make every section show up in resources/list. The
    template catches reads of ids that are not in the catalog so the
    client gets an error naming the missing section.
    """
    for item in service.list_resources():
        mcp.resource(
            item["uri"],
            name=item["name"],
            description=item["description"],
            mime_type=item["mimeType"],
        )(_reader(service, item["uri"]))

    @mcp.resource(
        f"{URI_SCHEME}:///{{entry_id}}",
        name="astro_docs_section",
        description="Astro documentation section by id",
        mime_type=MIME_TYPE,
    )
    def read_section(entry_id: str) -> str:
        return _read_text(service, f"{URI_SCHEME}:///{entry_id}")


def _reader(service: DocsService, uri: str) -> Callable[[], str]:
    def read() -> str:
        return _read_text(service, uri)

    return read


def _read_text(service: DocsService, uri: str) -> str:
    try:
        return service.read_resource(uri)["text"]
    except DocsError as exc:
        raise ResourceError(str(exc)) from exc
