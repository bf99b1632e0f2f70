"""Structured logging utilities for the MCP server.

Everything here writes to stderr; stdout carries the protocol stream only.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, TextIO

__all__ = ["LOGGER_NAME", "configure_logging", "log_request"]

LOGGER_NAME = "leptos_mcp.events"

logger = logging.getLogger(LOGGER_NAME)

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: int | str = logging.INFO, *, stream: TextIO | None = None) -> None:
    """Route all log records to stderr (or ``stream``) at ``level``."""

    logging.basicConfig(
        level=level,
        format=_LOG_FORMAT,
        stream=stream or sys.stderr,
        force=True,
    )


def log_request(
    method: str,
    request_id: Any,
    *,
    duration_ms: float,
    error_code: int | None = None,
) -> None:
    """Record the outcome of one answered request as a JSON line.

    ``status`` is derived from ``error_code``: a request answered with a
    result is ``ok``, one answered with an error object is ``error``.
    """

    record: dict[str, Any] = {
        "event": "request",
        "method": method,
        "id": request_id,
        "status": "ok" if error_code is None else "error",
        "duration_ms": round(duration_ms, 3),
    }
    if error_code is not None:
        record["error_code"] = error_code
    logger.info(json.dumps(record, sort_keys=True, default=str))
