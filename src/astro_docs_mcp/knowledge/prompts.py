"""Prompt composition from catalog entries.

A prompt is rendered as:
    1. the template's question (text)
    2. one embedded resource per referenced entry, in template order
    3. the template's closing instruction (text)

A referenced entry that is missing from the catalog does not fail the
prompt: its resource message keeps the entry's URI and carries the
reference's fallback text instead of the rendered entry.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from astro_docs_mcp.errors import CatalogError, UnknownPromptError
from astro_docs_mcp.knowledge.catalog import Catalog
from astro_docs_mcp.knowledge.formatter import DocFormatter
from astro_docs_mcp.knowledge.models import Message, PromptReference, PromptTemplate

logger = logging.getLogger("astro-docs-mcp.prompts")


class PromptComposer:
    """Builds message sequences for named prompt templates."""

    def __init__(self, catalog: Catalog, templates: Iterable[PromptTemplate]) -> None:
        self._catalog = catalog
        self._templates: dict[str, PromptTemplate] = {}
        for template in templates:
            if template.name in self._templates:
                raise CatalogError(f"Duplicate prompt name: {template.name}")
            self._templates[template.name] = template

    def list_prompts(self) -> list[dict[str, str]]:
        return [
            {"name": template.name, "description": template.description}
            for template in self._templates.values()
        ]

    def get_template(self, name: str) -> PromptTemplate:
        template = self._templates.get(name)
        if template is None:
            raise UnknownPromptError(name)
        return template

    def get_prompt(self, name: str) -> list[Message]:
        template = self.get_template(name)
        messages = [Message.from_text(template.question)]
        messages.extend(self._render_reference(name, ref) for ref in template.references)
        messages.append(Message.from_text(template.instruction))
        return messages

    def _render_reference(self, prompt_name: str, ref: PromptReference) -> Message:
        uri = DocFormatter.resource_uri(ref.entry_id)
        entry = self._catalog.find(ref.entry_id)
        if entry is None:
            logger.warning(
                "Prompt %s references missing section %s; using fallback text",
                prompt_name,
                ref.entry_id,
            )
            return Message.from_resource(uri, ref.fallback)
        return Message.from_resource(uri, DocFormatter.format_entry(entry, self._catalog.link_for(entry)))
