"""Environment configuration, logging setup and the smoke client."""

import asyncio
import json
import logging
import sys
from pathlib import Path

import pytest
from fastmcp import Client, FastMCP

from astro_docs_mcp.config import get_server_config
from astro_docs_mcp.knowledge import CatalogLoader
from astro_docs_mcp.knowledge.config import CATALOG_PATH, PROMPTS_PATH
from astro_docs_mcp.server import configure_logging, get_server, main
from astro_docs_mcp.smoke import run_smoke

ENV_KEYS = [
    "ASTRO_DOCS_MCP_CATALOG_PATH",
    "ASTRO_DOCS_MCP_PROMPTS_PATH",
    "ASTRO_DOCS_MCP_BASE_URL",
    "ASTRO_DOCS_MCP_LOG_LEVEL",
]


@pytest.fixture()
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_config_defaults(clean_env) -> None:
    config = get_server_config()

    assert config.catalog_path == CATALOG_PATH
    assert config.prompts_path == PROMPTS_PATH
    assert config.base_url is None
    assert config.log_level == "WARNING"


def test_config_from_environment(clean_env, tmp_path) -> None:
    clean_env.setenv("ASTRO_DOCS_MCP_CATALOG_PATH", str(tmp_path / "catalog.json"))
    clean_env.setenv("ASTRO_DOCS_MCP_BASE_URL", " https://mirror.example ")
    clean_env.setenv("ASTRO_DOCS_MCP_LOG_LEVEL", "debug")

    config = get_server_config()

    assert config.catalog_path == tmp_path / "catalog.json"
    assert config.base_url == "https://mirror.example"
    assert config.log_level == "DEBUG"


def test_config_ignores_unknown_log_level(clean_env) -> None:
    clean_env.setenv("ASTRO_DOCS_MCP_LOG_LEVEL", "chatty")

    assert get_server_config().log_level == "WARNING"


def test_cli_overrides_win(clean_env) -> None:
    config = get_server_config().with_overrides(catalog_path=Path("/tmp/other.json"), log_level="info")

    assert config.catalog_path == Path("/tmp/other.json")
    assert config.log_level == "INFO"
    assert config.prompts_path == PROMPTS_PATH


def test_configure_logging_targets_stderr() -> None:
    logger = logging.getLogger("astro-docs-mcp")
    saved = (logger.handlers[:], logger.level, logger.propagate)
    try:
        configure_logging("INFO")

        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1
        assert logger.handlers[0].stream is sys.stderr
    finally:
        logger.handlers[:], logger.level, logger.propagate = saved


@pytest.mark.asyncio
async def test_smoke_run_reports_each_step() -> None:
    report = await run_smoke(get_server())

    assert report[0] == "resources/list: 68 sections"
    assert "Astro Islands" in report[1]
    assert report[2].startswith("resources/read astro-docs:///getting-started:\n# Getting Started")


@pytest.fixture()
def run_main(clean_env, monkeypatch):
    """Run ``main()`` with patched argv and a recording FastMCP.run."""
    started: list[tuple[FastMCP, dict]] = []
    monkeypatch.setattr(FastMCP, "run", lambda self, **kwargs: started.append((self, kwargs)))

    logger = logging.getLogger("astro-docs-mcp")
    saved = (logger.handlers[:], logger.level, logger.propagate)
    CatalogLoader.clear_cache()

    def _run(*argv: str) -> list[tuple[FastMCP, dict]]:
        monkeypatch.setattr(sys, "argv", ["astro-docs-mcp", *argv])
        main()
        return started

    yield _run

    CatalogLoader.clear_cache()
    logger.handlers[:], logger.level, logger.propagate = saved


def _write_catalog(path: Path) -> Path:
    entries = [
        {"id": "alpha", "title": "Alpha", "content": "Alpha body.", "path": "/alpha/", "category": "core"},
        {"id": "beta", "title": "Beta", "content": "Beta body.", "path": "/beta/", "category": "guides"},
    ]
    path.write_text(json.dumps({"base_url": "https://docs.astro.build", "entries": entries}), encoding="utf-8")
    return path


def _resource_count(server: FastMCP) -> int:
    async def _count() -> int:
        async with Client(server) as client:
            return len(await client.list_resources())

    return asyncio.run(_count())


def test_main_catalog_flag_wins_over_environment(run_main, clean_env, tmp_path, capsys) -> None:
    clean_env.setenv("ASTRO_DOCS_MCP_CATALOG_PATH", str(tmp_path / "missing.json"))
    catalog = _write_catalog(tmp_path / "catalog.json")

    started = run_main("--catalog", str(catalog), "--log-level", "info")

    assert len(started) == 1
    server, run_kwargs = started[0]
    assert run_kwargs == {"transport": "stdio", "show_banner": False}
    assert _resource_count(server) == 2
    assert f"Loaded 2 documentation sections from {catalog}" in capsys.readouterr().err


def test_main_reports_bad_catalog_path(run_main, clean_env, tmp_path, capsys) -> None:
    clean_env.setenv("ASTRO_DOCS_MCP_CATALOG_PATH", str(tmp_path / "missing.json"))

    with pytest.raises(SystemExit) as excinfo:
        run_main()

    assert excinfo.value.code == 1
    assert "Documentation data file not found" in capsys.readouterr().err


def test_main_version_ignores_catalog_config(run_main, clean_env, tmp_path, capsys) -> None:
    clean_env.setenv("ASTRO_DOCS_MCP_CATALOG_PATH", str(tmp_path / "missing.json"))

    with pytest.raises(SystemExit) as excinfo:
        run_main("--version")

    assert excinfo.value.code == 0
    assert "astro-docs-mcp 0.1.0" in capsys.readouterr().out
