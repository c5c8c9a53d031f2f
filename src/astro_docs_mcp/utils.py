"""Input types and coercion helpers for astro-docs-mcp tools."""

from typing import Annotated, Any

from pydantic import Field
from pydantic.functional_validators import BeforeValidator

QUERY_DESCRIPTION = (
    "Search term to find in Astro documentation. Matches titles, "
    "content and categories as a case-insensitive substring. "
    "Examples: 'islands', 'routing', 'content collections'."
)


def coerce_query(value: Any) -> str:
    """Coerce a raw tool argument to a query string.

    Falsy values (None, "", 0, empty containers) become "", anything else
    goes through ``str()``. Whitespace is kept: search is substring based.
    """
    return str(value) if value else ""


# Search query for search_docs; non-string arguments are coerced before validation
SearchQuery = Annotated[
    str,
    BeforeValidator(coerce_query),
    Field(description=QUERY_DESCRIPTION),
]
