from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from apps.leptos_mcp.capabilities import CapabilityTable, OperationRegistry
from apps.leptos_mcp.config import ServerSettings
from apps.leptos_mcp.errors import MissingName, MissingParams, UnknownOperation
from apps.leptos_mcp.models import JsonRpcRequest

__all__ = ["Dispatcher", "tool_result"]

LOGGER = logging.getLogger(__name__)

Handler = Callable[[Any], dict[str, Any]]


def tool_result(text: str, *, is_error: bool = False) -> dict[str, Any]:
    """Wrap operation output in the ``tools/call`` result envelope."""

    result: dict[str, Any] = {"content": [{"type": "text", "text": text}]}
    if is_error:
        result["isError"] = True
    return result


class Dispatcher:
    """Resolve a request's method to a result payload.

    ``handle`` returns the ``result`` member for a successful response or
    raises a :class:`~apps.leptos_mcp.errors.ProtocolError`. Methods the
    server does not know are answered with an empty result rather than a
    ``Method not found`` error, so clients probing optional methods still get
    a reply.
    """

    def __init__(
        self,
        *,
        table: CapabilityTable,
        registry: OperationRegistry,
        settings: ServerSettings | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._table = table
        self._registry = registry
        self._settings = settings or ServerSettings()
        self._logger = logger or LOGGER
        self._handlers: dict[str, Handler] = {
            "initialize": self._initialize,
            "tools/list": self._list_tools,
            "tools/call": self._call_tool,
        }

    def handle(self, request: JsonRpcRequest) -> dict[str, Any]:
        self._logger.debug("Handling request: %s", request.method)
        handler = self._handlers.get(request.method)
        if handler is None:
            self._logger.warning("Unknown method: %s", request.method)
            return {}
        return handler(request.params)

    def notify(self, request: JsonRpcRequest) -> None:
        # Notifications carry no reply; nothing beyond logging is defined for them.
        self._logger.info("Received notification: %s", request.method)

    def _initialize(self, params: Any) -> dict[str, Any]:
        return {
            "protocolVersion": self._settings.protocol_version,
            "capabilities": {"tools": {}},
            "serverInfo": {
                "name": self._settings.server_name,
                "version": self._settings.server_version,
            },
        }

    def _list_tools(self, params: Any) -> dict[str, Any]:
        return self._table.to_wire()

    def _call_tool(self, params: Any) -> dict[str, Any]:
        if params is None:
            raise MissingParams()
        name = params.get("name") if isinstance(params, Mapping) else None
        if not isinstance(name, str):
            raise MissingName()
        if name not in self._registry:
            raise UnknownOperation(name)

        raw_arguments = params.get("arguments")
        arguments = dict(raw_arguments) if isinstance(raw_arguments, Mapping) else {}
        try:
            text = self._registry.invoke(name, arguments)
        except Exception as exc:
            self._logger.exception("Tool %s failed", name)
            return tool_result(f"Tool '{name}' failed: {exc}", is_error=True)
        return tool_result(text)
