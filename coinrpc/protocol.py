"""
JSON-RPC wire helpers: request encoding and response decoding.
"""

from __future__ import annotations

import json
from typing import Any, Sequence

from .errors import RPCDecodeError

JSONRPC_VERSION = "2.0"


def encode_request(method: str, params: Sequence[Any] | None = None, *, request_id: str = "coinrpc") -> bytes:
    payload = {
        "jsonrpc": JSONRPC_VERSION,
        "id": request_id,
        "method": method,
        "params": list(params) if params else [],
    }
    return json.dumps(payload).encode("utf-8")


def decode_envelope(body: bytes | str) -> dict[str, Any]:
    """Parse one response body into an envelope mapping."""

    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise RPCDecodeError(f"Response is not valid UTF-8: {exc}") from exc
    try:
        data = json.loads(body)
    except ValueError as exc:
        raise RPCDecodeError(f"Response is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise RPCDecodeError(f"Expected a JSON object, got {type(data).__name__}")
    return data
