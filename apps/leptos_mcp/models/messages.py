"""JSON-RPC 2.0 message models."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr, model_validator

__all__ = ["JSONRPC_VERSION", "JsonRpcError", "JsonRpcRequest", "JsonRpcResponse"]

JSONRPC_VERSION = "2.0"


class JsonRpcError(BaseModel):
    """Error descriptor carried by a failed response."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    code: StrictInt
    message: StrictStr


class JsonRpcRequest(BaseModel):
    """Incoming JSON-RPC request or notification.

    ``id`` is optional; a message without one (or with ``null``) is a
    notification and never receives a reply. ``params`` is kept as the raw
    decoded value because its shape is checked per method by the dispatcher.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    jsonrpc: Literal["2.0"]
    method: StrictStr
    id: Any = None
    params: Any = None

    @property
    def is_notification(self) -> bool:
        return self.id is None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"jsonrpc": self.jsonrpc}
        if self.id is not None:
            payload["id"] = self.id
        payload["method"] = self.method
        if self.params is not None:
            payload["params"] = self.params
        return payload


class JsonRpcResponse(BaseModel):
    """Outgoing JSON-RPC response holding exactly one of ``result`` or ``error``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    jsonrpc: Literal["2.0"] = JSONRPC_VERSION
    id: Any
    result: dict[str, Any] | None = None
    error: JsonRpcError | None = None

    @model_validator(mode="after")
    def _check_outcome(self) -> JsonRpcResponse:
        if (self.result is None) == (self.error is None):
            raise ValueError("response must carry exactly one of result or error")
        return self

    @classmethod
    def success(cls, request_id: Any, result: Mapping[str, Any]) -> JsonRpcResponse:
        return cls(id=request_id, result=dict(result))

    @classmethod
    def failure(cls, request_id: Any, *, code: int, message: str) -> JsonRpcResponse:
        return cls(id=request_id, error=JsonRpcError(code=code, message=message))

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        """Return the wire mapping with members in ``jsonrpc, id, result|error`` order."""

        payload: dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            payload["error"] = self.error.model_dump()
        else:
            payload["result"] = self.result
        return payload
