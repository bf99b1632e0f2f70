"""Runtime settings for the Leptos MCP server."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

from apps.leptos_mcp.errors import ConfigError

__all__ = ["LOG_LEVELS", "PROTOCOL_VERSION", "ServerSettings"]

PROTOCOL_VERSION = "2024-11-05"

LOG_LEVELS = ("DEBUG", "INFO", "WARN", "WARNING", "ERROR")

_ENV_LOG_LEVEL = "LEPTOS_MCP_LOG_LEVEL"
_ENV_DOCS_DIR = "LEPTOS_MCP_DOCS_DIR"


def _normalise_level(raw: str) -> str:
    level = raw.strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigError(
            f"Unsupported log level {raw!r}; expected one of {', '.join(LOG_LEVELS)}"
        )
    return "WARNING" if level == "WARN" else level


@dataclass(frozen=True, slots=True)
class ServerSettings:
    """Process-wide configuration resolved once at startup."""

    server_name: str = "leptos-mcp-server"
    server_version: str = "0.1.0"
    protocol_version: str = PROTOCOL_VERSION
    log_level: str = "INFO"
    docs_dir: Path | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ServerSettings:
        env = os.environ if environ is None else environ
        settings = cls()
        raw_level = env.get(_ENV_LOG_LEVEL)
        if raw_level:
            settings = replace(settings, log_level=_normalise_level(raw_level))
        raw_docs = env.get(_ENV_DOCS_DIR)
        if raw_docs:
            settings = replace(settings, docs_dir=Path(raw_docs))
        return settings

    def with_overrides(
        self,
        *,
        log_level: str | None = None,
        docs_dir: str | Path | None = None,
    ) -> ServerSettings:
        settings = self
        if log_level:
            settings = replace(settings, log_level=_normalise_level(log_level))
        if docs_dir:
            settings = replace(settings, docs_dir=Path(docs_dir))
        return settings

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level)
