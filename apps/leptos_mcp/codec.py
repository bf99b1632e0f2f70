"""Newline-delimited JSON-RPC codec.

One input line decodes to one :class:`JsonRpcRequest`; one response encodes to
one output line. Newlines inside string values are always JSON-escaped, so the
framing boundary can never appear inside an encoded message.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from apps.leptos_mcp.errors import DecodeError
from apps.leptos_mcp.models import JsonRpcRequest, JsonRpcResponse

__all__ = ["decode", "decode_response", "dumps", "encode"]


def _load_object(line: str, *, kind: str) -> Mapping[str, Any]:
    def reject_constant(token: str) -> Any:
        raise DecodeError(f"Invalid JSON: {token} is not a JSON number", line=line)

    def parse_float(token: str) -> float:
        value = float(token)
        if not math.isfinite(value):
            raise DecodeError(f"Invalid JSON: number out of range: {token}", line=line)
        return value

    try:
        message = json.loads(line, parse_constant=reject_constant, parse_float=parse_float)
    except json.JSONDecodeError as exc:
        raise DecodeError(f"Invalid JSON: {exc.msg} (column {exc.colno})", line=line) from exc
    except ValueError as exc:
        # Integers beyond the interpreter's digit limit.
        raise DecodeError(f"Invalid JSON: {exc}", line=line) from exc
    except RecursionError as exc:
        raise DecodeError("Invalid JSON: nesting too deep", line=line) from exc
    if not isinstance(message, Mapping):
        raise DecodeError(f"{kind} must be a JSON object", line=line)
    return message


def _describe(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "message"
    return f"{location}: {first['msg']}"


def decode(line: str) -> JsonRpcRequest:
    """Parse a single line into a request, raising :class:`DecodeError`."""

    message = _load_object(line, kind="Request")
    try:
        return JsonRpcRequest.model_validate(message)
    except ValidationError as exc:
        raise DecodeError(f"Invalid request: {_describe(exc)}", line=line) from exc


def dumps(payload: Mapping[str, Any]) -> str:
    return json.dumps(payload, separators=(",", ":"), allow_nan=False)


def encode(response: JsonRpcResponse) -> str:
    """Serialise a response to exactly one line, without the trailing newline."""

    return dumps(response.to_dict())


def decode_response(line: str) -> JsonRpcResponse:
    """Parse a line written by :func:`encode` back into a response."""

    message = _load_object(line, kind="Response")
    try:
        return JsonRpcResponse.model_validate(message)
    except ValidationError as exc:
        raise DecodeError(f"Invalid response: {_describe(exc)}", line=line) from exc
