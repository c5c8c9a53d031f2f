"""Astro documentation knowledge base.

Components:
    - Catalog: Immutable ordered entry store with lookup and search
    - CatalogLoader: Load catalog and prompt templates from JSON files
    - DocFormatter: Render entries as plain text
    - PromptComposer: Build prompt message sequences from templates

Data Models:
    - Entry, PromptTemplate, PromptReference, Message
"""

from astro_docs_mcp.knowledge.catalog import Catalog
from astro_docs_mcp.knowledge.formatter import DocFormatter
from astro_docs_mcp.knowledge.loader import CatalogLoader
from astro_docs_mcp.knowledge.models import Entry, Message, PromptReference, PromptTemplate
from astro_docs_mcp.knowledge.prompts import PromptComposer

__all__ = [
    # Core components
    "Catalog",
    "CatalogLoader",
    "DocFormatter",
    "PromptComposer",
    # Data models
    "Entry",
    "Message",
    "PromptReference",
    "PromptTemplate",
]
