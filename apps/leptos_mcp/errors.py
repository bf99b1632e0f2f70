from __future__ import annotations

from apps.leptos_mcp.models import JsonRpcError

__all__ = [
    "ConfigError",
    "DecodeError",
    "INTERNAL_ERROR",
    "INVALID_REQUEST",
    "LeptosMcpError",
    "MissingName",
    "MissingParams",
    "ProtocolError",
    "UnknownOperation",
]


# JSON-RPC 2.0 error codes used by the server.
INVALID_REQUEST = -32600
INTERNAL_ERROR = -32603


class LeptosMcpError(Exception):
    """Base class for errors raised by the MCP server."""


class ConfigError(LeptosMcpError):
    """Raised when the server configuration cannot be resolved."""


class DecodeError(LeptosMcpError):
    """Raised when an input line cannot be parsed into a request."""

    def __init__(self, message: str, *, line: str | None = None) -> None:
        super().__init__(message)
        self.line = line


class ProtocolError(LeptosMcpError):
    """A request-level failure reported back to the peer as an error response."""

    code: int = INVALID_REQUEST

    def __init__(self, message: str, *, code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def to_error(self) -> JsonRpcError:
        return JsonRpcError(code=self.code, message=self.message)


class MissingParams(ProtocolError):
    def __init__(self) -> None:
        super().__init__("Missing params")


class MissingName(ProtocolError):
    def __init__(self) -> None:
        super().__init__("Missing tool name")


class UnknownOperation(ProtocolError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name
