"""
Classification and extraction over decoded JSON-RPC envelopes.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

from .coerce import FieldType, coerce
from .errors import NoResultError, RPCResponseError


class ResultShape(Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    OPAQUE = "opaque"


def check_error(envelope: Mapping[str, Any]) -> RPCResponseError | None:
    """Return the envelope's error when its code is non-zero.

    An ``error`` object whose code is zero or missing is inert: the daemon
    may send one alongside a successful result, message included.
    """

    error = envelope.get("error")
    if not isinstance(error, dict):
        return None
    code = coerce(error.get("code"), FieldType.INTEGER)
    message = coerce(error.get("message", ""), FieldType.STRING)
    if code == 0:
        return None
    return RPCResponseError(code, message)


def _is_scalar_number(value: Any) -> bool:
    return isinstance(value, (str, int, float)) and not isinstance(value, bool)


def extract_result(envelope: Mapping[str, Any], shape: ResultShape) -> Any:
    """Pull ``result`` out of a clean envelope in the requested shape.

    Typed shapes raise :class:`NoResultError` when the result is missing or of
    the wrong kind. ``OPAQUE`` never fails and falls back to an empty dict.
    """

    if shape is ResultShape.OPAQUE:
        value = envelope.get("result")
        return value if isinstance(value, dict) else {}

    if "result" not in envelope:
        raise NoResultError()
    value = envelope["result"]
    if shape is ResultShape.STRING and isinstance(value, str):
        return value
    if shape is ResultShape.NUMBER and _is_scalar_number(value):
        return coerce(value, FieldType.FLOAT)
    if shape is ResultShape.BOOLEAN and isinstance(value, bool):
        return value
    if shape is ResultShape.OBJECT and isinstance(value, dict):
        return value
    raise NoResultError()
