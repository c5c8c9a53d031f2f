"""Astro documentation data configuration.

Defines paths for the static documentation data bundled with astro-docs-mcp
and the fixed constants used to address and link catalog entries.
"""

from pathlib import Path

# Base path for bundled data files
_DATA_DIR = Path(__file__).parent / "data"

# Documentation catalog (version-controlled, JSON format)
# Contains 68 documentation sections with id, title, content, path, category
CATALOG_PATH = _DATA_DIR / "catalog.json"

# Prompt templates (version-controlled, JSON format)
# Each template names up to 3 catalog entries to embed
PROMPTS_PATH = _DATA_DIR / "prompts.json"

# External documentation site; entry paths are appended to it
DEFAULT_BASE_URL = "https://docs.astro.build"

# Resources are addressed as astro-docs:///<entry id>
URI_SCHEME = "astro-docs"

MIME_TYPE = "text/plain"

# Characters of entry content shown per search hit
SEARCH_SNIPPET_LENGTH = 100

# Upper bound on entries embedded by one prompt template
MAX_PROMPT_REFERENCES = 3
