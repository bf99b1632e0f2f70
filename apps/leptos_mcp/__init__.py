"""Leptos documentation MCP server speaking JSON-RPC over STDIO.

Import the factories from :mod:`apps.leptos_mcp.app` and the entry point from
:mod:`apps.leptos_mcp.cli`; the registry package depends on this package's
models, so neither is loaded here.
"""

from apps.leptos_mcp.config import ServerSettings
from apps.leptos_mcp.dispatcher import Dispatcher
from apps.leptos_mcp.session import StdioSession

__all__ = ["Dispatcher", "ServerSettings", "StdioSession"]
