"""Data loading layer for the Astro documentation catalog.

This module loads the catalog and prompt templates from JSON files with
caching, so a process reads each file at most once.

Responsibilities:
- Load catalog.json (68 documentation sections across 12 categories)
- Load prompts.json (24 prompt templates)
- Validate both with pydantic and report problems as CatalogError
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from astro_docs_mcp.errors import CatalogError
from astro_docs_mcp.knowledge.catalog import Catalog
from astro_docs_mcp.knowledge.config import CATALOG_PATH, PROMPTS_PATH
from astro_docs_mcp.knowledge.models import CatalogFile, PromptsFile, PromptTemplate

logger = logging.getLogger("astro-docs-mcp.loader")


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise CatalogError(f"Documentation data file not found: {path}")
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as exc:
        raise CatalogError(f"Invalid JSON in {path}: {exc}") from exc


class CatalogLoader:
    """Loads and caches catalog and prompt data.

    This class provides static methods only. Results are cached per
    (path, base_url) so repeated server construction does not re-read files.
    """

    @staticmethod
    @lru_cache(maxsize=4)
    def load_catalog(path: Path = CATALOG_PATH, base_url: str | None = None) -> Catalog:
        """Load a documentation catalog.

        Args:
            path: JSON file with ``base_url`` and an ordered ``entries`` list
            base_url: Overrides the base URL stored in the file

        Returns:
            Immutable Catalog in file order

        Raises:
            CatalogError: missing file, bad JSON, invalid or duplicate entries

        Example:
            >>> catalog = CatalogLoader.load_catalog()
            >>> catalog.get("routing").title
            'Routing'
        """
        raw = _read_json(path)
        try:
            parsed = CatalogFile.model_validate(raw)
        except ValidationError as exc:
            raise CatalogError(f"Invalid catalog {path}: {exc}") from exc

        catalog = Catalog(parsed.entries, base_url=base_url or parsed.base_url)
        logger.info("Loaded %d documentation sections from %s", len(catalog), path)
        return catalog

    @staticmethod
    @lru_cache(maxsize=4)
    def load_prompts(path: Path = PROMPTS_PATH) -> tuple[PromptTemplate, ...]:
        """Load prompt templates in declaration order.

        Raises:
            CatalogError: missing file, bad JSON, invalid or duplicate templates
        """
        raw = _read_json(path)
        try:
            parsed = PromptsFile.model_validate(raw)
        except ValidationError as exc:
            raise CatalogError(f"Invalid prompt templates {path}: {exc}") from exc

        logger.info("Loaded %d prompt templates from %s", len(parsed.prompts), path)
        return tuple(parsed.prompts)

    @staticmethod
    def clear_cache() -> None:
        """Clear all cached data.

        Useful for testing or when data files are edited on disk.
        """
        CatalogLoader.load_catalog.cache_clear()
        CatalogLoader.load_prompts.cache_clear()
