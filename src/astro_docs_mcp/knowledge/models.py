"""Data models for the Astro documentation catalog.

Entries and prompt templates are validated with pydantic when the bundled
JSON data is loaded and are frozen afterwards: nothing in the running server
mutates them.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from astro_docs_mcp.knowledge.config import (
    DEFAULT_BASE_URL,
    MAX_PROMPT_REFERENCES,
    MIME_TYPE,
)

NonEmptyStr = Annotated[str, Field(min_length=1)]


class Entry(BaseModel):
    """One documentation section."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: NonEmptyStr = Field(description="Stable unique identifier, also the resource key")
    title: NonEmptyStr = Field(description="Human-readable display name")
    content: NonEmptyStr = Field(description="Body text")
    path: NonEmptyStr = Field(description="Path appended to the docs base URL")
    category: NonEmptyStr = Field(description="Coarse grouping tag")


class CatalogFile(BaseModel):
    """On-disk shape of ``catalog.json``."""

    model_config = ConfigDict(frozen=True)

    base_url: NonEmptyStr = DEFAULT_BASE_URL
    entries: list[Entry]


class PromptReference(BaseModel):
    """A catalog entry embedded by a prompt template."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    entry_id: NonEmptyStr
    fallback_text: str | None = Field(
        default=None,
        description="Text used in place of the entry when it is absent from the catalog",
    )

    @property
    def fallback(self) -> str:
        if self.fallback_text:
            return self.fallback_text
        return f"Documentation section '{self.entry_id}' is not available."


class PromptTemplate(BaseModel):
    """A named conversation seed built from catalog entries."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: NonEmptyStr
    description: NonEmptyStr
    question: NonEmptyStr = Field(description="Opening question message")
    references: list[PromptReference] = Field(
        default_factory=list, max_length=MAX_PROMPT_REFERENCES
    )
    instruction: NonEmptyStr = Field(description="Closing instruction message")


class PromptsFile(BaseModel):
    """On-disk shape of ``prompts.json``."""

    prompts: list[PromptTemplate]

    @model_validator(mode="after")
    def _unique_names(self) -> "PromptsFile":
        seen: set[str] = set()
        for template in self.prompts:
            if template.name in seen:
                raise ValueError(f"duplicate prompt name: {template.name}")
            seen.add(template.name)
        return self


class Message(BaseModel):
    """One message of a composed prompt.

    ``kind == "text"`` carries only ``text``; ``kind == "resource"`` is an
    embedded resource and also carries ``uri`` and ``mime_type``.
    """

    model_config = ConfigDict(frozen=True)

    role: Literal["user"] = "user"
    kind: Literal["text", "resource"]
    text: str
    uri: str | None = None
    mime_type: str | None = None

    @model_validator(mode="after")
    def _validate_coherence(self) -> "Message":
        if self.kind == "resource" and self.uri is None:
            raise ValueError("resource messages must include a uri")
        if self.kind == "text" and self.uri is not None:
            raise ValueError("text messages must not include a uri")
        return self

    @classmethod
    def from_text(cls, text: str) -> "Message":
        return cls(kind="text", text=text)

    @classmethod
    def from_resource(cls, uri: str, text: str) -> "Message":
        return cls(kind="resource", uri=uri, mime_type=MIME_TYPE, text=text)
