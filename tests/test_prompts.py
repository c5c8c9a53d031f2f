"""Prompt listing and composition."""

import json

import pytest

from astro_docs_mcp.errors import CatalogError, UnknownPromptError
from astro_docs_mcp.knowledge import (
    Catalog,
    CatalogLoader,
    Entry,
    PromptComposer,
    PromptReference,
    PromptTemplate,
)


@pytest.fixture(scope="module")
def composer() -> PromptComposer:
    return PromptComposer(CatalogLoader.load_catalog(), CatalogLoader.load_prompts())


def _template(name: str, *entry_ids: str) -> PromptTemplate:
    return PromptTemplate(
        name=name,
        description=f"{name} prompt",
        question="Question?",
        references=[PromptReference(entry_id=entry_id) for entry_id in entry_ids],
        instruction="Answer it.",
    )


def test_list_prompts_is_stable_and_unique(composer: PromptComposer) -> None:
    prompts = composer.list_prompts()
    names = [prompt["name"] for prompt in prompts]

    assert len(prompts) == 24
    assert names[0] == "explain_astro_islands"
    assert names[-1] == "migration_guide"
    assert len(set(names)) == len(names)
    assert composer.list_prompts() == prompts
    assert all(prompt["description"] for prompt in prompts)


def test_explain_astro_islands_embeds_entry(composer: PromptComposer) -> None:
    catalog = CatalogLoader.load_catalog()
    islands = catalog.get("astro-islands")

    messages = composer.get_prompt("explain_astro_islands")

    assert [message.kind for message in messages] == ["text", "resource", "resource", "text"]
    assert all(message.role == "user" for message in messages)
    assert messages[0].text == "Can you explain Astro Islands architecture to me?"

    embedded = messages[1]
    assert embedded.uri == "astro-docs:///astro-islands"
    assert embedded.mime_type == "text/plain"
    assert embedded.text == (
        f"# {islands.title}\n\n{islands.content}\n\n"
        f"For more details, see: https://docs.astro.build{islands.path}"
    )
    assert messages[2].uri == "astro-docs:///hydration"
    assert messages[-1].text.startswith("Please explain Astro Islands in simple terms")


def test_every_listed_prompt_resolves_against_bundled_catalog(composer: PromptComposer) -> None:
    catalog = CatalogLoader.load_catalog()

    for prompt in composer.list_prompts():
        template = composer.get_template(prompt["name"])
        messages = composer.get_prompt(prompt["name"])

        assert 1 <= len(template.references) <= 3
        assert len(messages) == len(template.references) + 2
        for ref in template.references:
            assert ref.entry_id in catalog
        for message in messages[1:-1]:
            assert message.kind == "resource"
            assert message.text.startswith("# ")


def test_unknown_prompt_raises(composer: PromptComposer) -> None:
    with pytest.raises(UnknownPromptError) as excinfo:
        composer.get_prompt("does-not-exist")

    assert excinfo.value.code == "unknown_prompt"
    assert "does-not-exist" in str(excinfo.value)


def test_missing_reference_uses_fallback_text(caplog) -> None:
    """Every reference is optional: a missing entry never fails the prompt."""
    catalog = Catalog(
        [Entry(id="alpha", title="Alpha", content="Alpha body.", path="/alpha/", category="core")]
    )
    template = PromptTemplate(
        name="mixed",
        description="One present, one missing",
        question="Question?",
        references=[
            PromptReference(entry_id="alpha"),
            PromptReference(entry_id="gone", fallback_text="Information on gone things"),
            PromptReference(entry_id="also-gone"),
        ],
        instruction="Answer it.",
    )
    composer = PromptComposer(catalog, [template])

    with caplog.at_level("WARNING", logger="astro-docs-mcp.prompts"):
        messages = composer.get_prompt("mixed")

    assert messages[1].text.startswith("# Alpha")
    assert messages[2].uri == "astro-docs:///gone"
    assert messages[2].text == "Information on gone things"
    assert messages[3].uri == "astro-docs:///also-gone"
    assert messages[3].text == "Documentation section 'also-gone' is not available."
    assert "gone" in caplog.text


def test_template_without_references() -> None:
    composer = PromptComposer(Catalog([]), [_template("bare")])

    messages = composer.get_prompt("bare")

    assert [message.kind for message in messages] == ["text", "text"]


def test_template_allows_at_most_three_references() -> None:
    with pytest.raises(ValueError):
        _template("too_many", "a", "b", "c", "d")


def test_composer_rejects_duplicate_names() -> None:
    with pytest.raises(CatalogError, match="Duplicate prompt name"):
        PromptComposer(Catalog([]), [_template("twice"), _template("twice")])


def test_load_prompts_rejects_duplicate_names(tmp_path) -> None:
    template = _template("twice").model_dump()
    path = tmp_path / "prompts.json"
    path.write_text(json.dumps({"prompts": [template, template]}), encoding="utf-8")

    with pytest.raises(CatalogError, match="Invalid prompt templates"):
        CatalogLoader.load_prompts(path)
