"""Immutable documentation catalog with lookup and substring search."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from types import MappingProxyType

from astro_docs_mcp.errors import CatalogError, EntryNotFoundError
from astro_docs_mcp.knowledge.config import DEFAULT_BASE_URL
from astro_docs_mcp.knowledge.models import Entry


class Catalog:
    """Ordered, read-only mapping of entry id to :class:`Entry`.

    Built once at startup. Iteration, :meth:`list` and :meth:`search` follow
    the order in which entries were declared.

    Raises:
        CatalogError: if two entries share an id
    """

    def __init__(self, entries: Iterable[Entry], base_url: str = DEFAULT_BASE_URL) -> None:
        index: dict[str, Entry] = {}
        for entry in entries:
            if entry.id in index:
                raise CatalogError(f"Duplicate documentation id: {entry.id}")
            index[entry.id] = entry
        self._entries = MappingProxyType(index)
        self._base_url = base_url.rstrip("/")

    @property
    def base_url(self) -> str:
        return self._base_url

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries.values())

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._entries

    def list(self) -> list[Entry]:
        return list(self._entries.values())

    def get(self, entry_id: str) -> Entry:
        try:
            return self._entries[entry_id]
        except KeyError:
            raise EntryNotFoundError(entry_id) from None

    def find(self, entry_id: str) -> Entry | None:
        """Like :meth:`get` but returns None for unknown ids."""
        return self._entries.get(entry_id)

    def search(self, query: str) -> list[Entry]:
        """Case-insensitive substring match on title, content or category.

        No tokenization or ranking: "script" hits both "scripts" and
        "JavaScript". An empty query matches every entry.
        """
        needle = query.lower()
        return [
            entry
            for entry in self._entries.values()
            if needle in entry.title.lower()
            or needle in entry.content.lower()
            or needle in entry.category.lower()
        ]

    def link_for(self, entry: Entry) -> str:
        """External "see more" URL for an entry."""
        return f"{self._base_url}{entry.path}"
