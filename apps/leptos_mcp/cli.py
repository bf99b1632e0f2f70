from __future__ import annotations

import argparse
import logging
import sys

from apps.leptos_docs import DocManifestError
from apps.leptos_mcp.app import create_session
from apps.leptos_mcp.config import ServerSettings
from apps.leptos_mcp.errors import ConfigError
from apps.leptos_mcp.observability import configure_logging

LOGGER = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run the Leptos MCP server (JSON-RPC over STDIO)"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARN", "ERROR"],
        default=None,
        help="Logging level (default: $LEPTOS_MCP_LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--docs-dir",
        default=None,
        help="Directory holding sections.yaml (default: $LEPTOS_MCP_DOCS_DIR or bundled docs)",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    return create_parser().parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        settings = ServerSettings.from_env().with_overrides(
            log_level=args.log_level,
            docs_dir=args.docs_dir,
        )
        configure_logging(settings.logging_level)
        LOGGER.info("Starting Leptos MCP Server...")
        session = create_session(settings)
    except (ConfigError, DocManifestError) as exc:
        sys.stderr.write(f"leptos-mcp-server: {exc}\n")
        return 1

    try:
        session.run()
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
