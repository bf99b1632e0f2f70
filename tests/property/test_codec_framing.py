"""Property-based checks for newline framing of encoded responses."""

from __future__ import annotations

import json
from typing import Any

from hypothesis import given
from hypothesis import strategies as st

from apps.leptos_mcp.codec import decode, decode_response, encode
from apps.leptos_mcp.models import JsonRpcRequest, JsonRpcResponse

_ids = st.one_of(
    st.integers(min_value=-(2**53), max_value=2**53),
    st.text(min_size=1, max_size=20),
)

_json_leaves = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-(2**53), max_value=2**53),
    st.text(max_size=40),
)

_json_values = st.recursive(
    _json_leaves,
    lambda children: st.one_of(
        st.lists(children, max_size=4),
        st.dictionaries(st.text(max_size=8), children, max_size=4),
    ),
    max_leaves=12,
)


@given(_ids, st.text())
def test_encoded_text_result_is_one_line(request_id: Any, text: str) -> None:
    response = JsonRpcResponse.success(request_id, {"content": [{"type": "text", "text": text}]})
    line = encode(response)
    assert "\n" not in line
    assert "\r" not in line
    assert line.isascii()
    assert decode_response(line) == response


@given(_ids, st.dictionaries(st.text(max_size=8), _json_values, max_size=4))
def test_result_round_trip(request_id: Any, result: dict[str, Any]) -> None:
    response = JsonRpcResponse.success(request_id, result)
    decoded = decode_response(encode(response))
    assert decoded.id == request_id
    assert decoded.result == result


@given(_ids, st.integers(min_value=-32768, max_value=32767), st.text())
def test_error_round_trip(request_id: Any, code: int, message: str) -> None:
    response = JsonRpcResponse.failure(request_id, code=code, message=message)
    assert decode_response(encode(response)) == response


@given(_ids, st.text(min_size=1, max_size=30), _json_values)
def test_request_decode_preserves_fields(request_id: Any, method: str, params: Any) -> None:
    original = JsonRpcRequest(jsonrpc="2.0", id=request_id, method=method, params=params)
    decoded = decode(json.dumps(original.to_dict()))
    assert decoded.id == request_id
    assert decoded.method == method
    assert decoded.params == params
