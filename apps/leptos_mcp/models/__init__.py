"""Data models exchanged over the MCP wire."""

from .messages import JSONRPC_VERSION, JsonRpcError, JsonRpcRequest, JsonRpcResponse
from .tools import ToolDescriptor

__all__ = [
    "JSONRPC_VERSION",
    "JsonRpcError",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "ToolDescriptor",
]
