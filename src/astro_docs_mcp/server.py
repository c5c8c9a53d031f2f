"""Astro Docs MCP Server - Astro documentation exposed over MCP."""

import argparse
import logging
import sys
from pathlib import Path

from fastmcp import FastMCP

from astro_docs_mcp import __version__
from astro_docs_mcp.config import LOG_LEVELS, ServerConfig, get_server_config
from astro_docs_mcp.errors import CatalogError
from astro_docs_mcp.prompts import guides
from astro_docs_mcp.resources import doc_sections
from astro_docs_mcp.service import DocsService, build_service
from astro_docs_mcp.tools import search_docs

logger = logging.getLogger("astro-docs-mcp.server")

INSTRUCTIONS = (
    "Astro documentation MCP server. "
    "Read documentation sections as astro-docs:/// resources, "
    "search them with the search_docs tool, "
    "and use the curated prompts for common Astro tasks."
)


def create_server(service: DocsService) -> FastMCP:
    """Build a FastMCP server backed by the given service."""
    mcp = FastMCP("astro-docs-mcp", instructions=INSTRUCTIONS)

    search_docs.register(mcp, service)
    doc_sections.register(mcp, service)
    guides.register(mcp, service)

    return mcp


def service_from_config(config: ServerConfig) -> DocsService:
    return build_service(
        catalog_path=config.catalog_path,
        prompts_path=config.prompts_path,
        base_url=config.base_url,
    )


def configure_logging(level: str) -> None:
    """Send log records to stderr; stdout carries the stdio protocol stream."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    root = logging.getLogger("astro-docs-mcp")
    root.handlers[:] = [handler]
    root.setLevel(level)
    root.propagate = False


_server: FastMCP | None = None


def get_server() -> FastMCP:
    """Return the global server built from environment config, lazily."""
    global _server
    if _server is None:
        _server = create_server(service_from_config(get_server_config()))
    return _server


def main():
    """Entry point for the Astro docs MCP server."""
    parser = argparse.ArgumentParser(
        prog="astro-docs-mcp",
        description="Astro Docs MCP Server - Astro documentation exposed over MCP",
    )
    parser.add_argument("--version", "-v", action="version", version=f"astro-docs-mcp {__version__}")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http", "sse"],
        default="stdio",
        help="Transport protocol (default: stdio)",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind when using http/sse transport (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to bind when using http/sse transport (default: 8000)",
    )
    parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="Path to an alternate catalog JSON file (default: bundled catalog)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level for stderr output (default: WARNING)",
    )
    args = parser.parse_args()

    config = get_server_config().with_overrides(catalog_path=args.catalog, log_level=args.log_level)
    configure_logging(config.log_level)

    try:
        server = create_server(service_from_config(config))
    except CatalogError as exc:
        parser.exit(1, f"astro-docs-mcp: {exc}\n")

    run_kwargs: dict = {"transport": args.transport, "show_banner": False}
    if args.transport in ("http", "sse"):
        run_kwargs["host"] = args.host
        run_kwargs["port"] = args.port

    # Suppress noisy uvicorn shutdown messages (e.g. "Cancel N running task(s)")
    logging.getLogger("uvicorn.error").setLevel(logging.CRITICAL)

    logger.info("Starting astro-docs-mcp %s (%s transport)", __version__, args.transport)
    try:
        server.run(**run_kwargs)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
