"""Runtime configuration for the Astro docs MCP server."""

from dataclasses import dataclass, replace
import os
from pathlib import Path

from astro_docs_mcp.knowledge.config import CATALOG_PATH, PROMPTS_PATH

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_path(name: str, default: Path) -> Path:
    value = os.getenv(name)
    if not value:
        return default
    return Path(value).expanduser()


def _env_log_level(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        return default
    return level


@dataclass(frozen=True)
class ServerConfig:
    catalog_path: Path
    prompts_path: Path
    base_url: str | None
    log_level: str

    def with_overrides(
        self,
        *,
        catalog_path: Path | None = None,
        log_level: str | None = None,
    ) -> "ServerConfig":
        """Apply CLI flags on top of environment values."""
        config = self
        if catalog_path is not None:
            config = replace(config, catalog_path=catalog_path)
        if log_level is not None:
            config = replace(config, log_level=log_level.upper())
        return config


def get_server_config() -> ServerConfig:
    """Load server config from environment variables."""
    base_url = os.getenv("ASTRO_DOCS_MCP_BASE_URL")
    return ServerConfig(
        catalog_path=_env_path("ASTRO_DOCS_MCP_CATALOG_PATH", CATALOG_PATH),
        prompts_path=_env_path("ASTRO_DOCS_MCP_PROMPTS_PATH", PROMPTS_PATH),
        base_url=base_url.strip() if base_url and base_url.strip() else None,
        log_level=_env_log_level("ASTRO_DOCS_MCP_LOG_LEVEL", "WARNING"),
    )
