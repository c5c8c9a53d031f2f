"""Smoke client: exercise a running server end to end.

Connects a FastMCP client to the server in-process and prints the resource
listing, a search_docs call and one resource read. Useful after editing the
catalog data to check that the server still starts and answers.
"""

import argparse
import asyncio
import sys

from fastmcp import Client, FastMCP

DEFAULT_QUERY = "islands"
DEFAULT_URI = "astro-docs:///getting-started"


async def run_smoke(mcp: FastMCP, query: str = DEFAULT_QUERY, uri: str = DEFAULT_URI) -> list[str]:
    """Run the smoke sequence and return the printed report sections.

    Raises whatever the client raises on the first failing step.
    """
    report: list[str] = []
    async with Client(mcp) as client:
        resources = await client.list_resources()
        report.append(f"resources/list: {len(resources)} sections")

        result = await client.call_tool("search_docs", {"query": query})
        report.append(f"tools/call search_docs {query!r}:\n{result.content[0].text}")

        contents = await client.read_resource(uri)
        report.append(f"resources/read {uri}:\n{contents[0].text}")
    return report


def main() -> int:
    parser = argparse.ArgumentParser(
        prog="astro-docs-mcp-smoke",
        description="Send a few requests to the Astro docs MCP server and print the answers",
    )
    parser.add_argument("--query", default=DEFAULT_QUERY, help=f"search_docs query (default: {DEFAULT_QUERY})")
    parser.add_argument("--uri", default=DEFAULT_URI, help=f"resource to read (default: {DEFAULT_URI})")
    args = parser.parse_args()

    from astro_docs_mcp.server import get_server

    try:
        report = asyncio.run(run_smoke(get_server(), query=args.query, uri=args.uri))
    except Exception as exc:
        print(f"Smoke test failed: {exc}", file=sys.stderr)
        return 1

    for section in report:
        print(section)
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
