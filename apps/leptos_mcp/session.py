"""STDIO JSON-RPC session loop for the MCP server."""

from __future__ import annotations

import logging
import sys
import time
from dataclasses import dataclass
from enum import Enum
from typing import TextIO

from apps.leptos_mcp.codec import decode, encode
from apps.leptos_mcp.dispatcher import Dispatcher
from apps.leptos_mcp.errors import INTERNAL_ERROR, DecodeError, ProtocolError
from apps.leptos_mcp.models import JsonRpcRequest, JsonRpcResponse
from apps.leptos_mcp.observability import log_request

__all__ = ["LineOutcome", "LineResult", "StdioSession"]

LOGGER = logging.getLogger(__name__)


class LineOutcome(Enum):
    """What the loop does after a line has been handled."""

    CONTINUE = "continue"
    CONTINUE_LOGGED = "continue_logged"
    TERMINATE = "terminate"


@dataclass(frozen=True, slots=True)
class LineResult:
    outcome: LineOutcome
    response: JsonRpcResponse | None = None


class StdioSession:
    """Sequential request/response loop over a pair of text streams.

    Each line is read, decoded, dispatched and, for requests carrying an
    ``id``, answered and flushed before the next line is read. Notifications
    and undecodable lines never produce output.
    """

    def __init__(
        self,
        dispatcher: Dispatcher,
        *,
        reader: TextIO | None = None,
        writer: TextIO | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._dispatcher = dispatcher
        self._reader = reader or sys.stdin
        self._writer = writer or sys.stdout
        self._logger = logger or LOGGER

    def run(self) -> None:
        """Serve until the input stream ends or can no longer be read."""

        self._logger.info("Session started")
        while self.step() is not LineOutcome.TERMINATE:
            continue
        self._logger.info("Session ended")

    def step(self) -> LineOutcome:
        try:
            line = self._reader.readline()
        except (OSError, UnicodeDecodeError) as exc:
            self._logger.error("Failed to read line: %s", exc)
            return LineOutcome.TERMINATE
        if line == "":
            return LineOutcome.TERMINATE

        result = self.process_line(line)
        if result.response is not None:
            self._write(result.response)
        return result.outcome

    def process_line(self, raw_line: str) -> LineResult:
        line = raw_line.strip()
        if not line:
            return LineResult(LineOutcome.CONTINUE)

        try:
            request = decode(line)
        except DecodeError as exc:
            self._logger.warning("Failed to parse request: %s - line: %s", exc, line)
            return LineResult(LineOutcome.CONTINUE_LOGGED)
        except Exception:
            self._logger.exception("Unexpected error while decoding line: %s", line)
            return LineResult(LineOutcome.CONTINUE_LOGGED)

        if request.is_notification:
            self._dispatcher.notify(request)
            return LineResult(LineOutcome.CONTINUE)

        return LineResult(LineOutcome.CONTINUE, self._respond(request))

    def _respond(self, request: JsonRpcRequest) -> JsonRpcResponse:
        started = time.perf_counter()
        try:
            response = JsonRpcResponse.success(request.id, self._dispatcher.handle(request))
        except ProtocolError as exc:
            response = JsonRpcResponse(id=request.id, error=exc.to_error())
        except Exception as exc:
            self._logger.exception("Unhandled error while handling %s", request.method)
            response = JsonRpcResponse.failure(
                request.id,
                code=INTERNAL_ERROR,
                message=f"Internal error: {exc}",
            )
        log_request(
            request.method,
            request.id,
            duration_ms=(time.perf_counter() - started) * 1000.0,
            error_code=None if response.ok else response.error.code,
        )
        return response

    def _write(self, response: JsonRpcResponse) -> None:
        self._writer.write(encode(response) + "\n")
        self._writer.flush()
