"""
Coercion of string-or-number JSON scalars.

Daemons in the Bitcoin family are inconsistent about whether numeric fields
travel as JSON numbers or as strings, so every decode site funnels through
:func:`coerce` with the type it expects.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|[+-]?(?i:inf|infinity|nan)")
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class FieldType(Enum):
    STRING = "string"
    FLOAT = "float"
    INTEGER = "integer"


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a JSON number.
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def _render_number(value: int | float | Decimal) -> str:
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            return repr(value)
        value = Decimal(repr(value))
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def _to_float(value: Any) -> float:
    if isinstance(value, str):
        if _FLOAT_RE.fullmatch(value) is None:
            return 0.0
        return float(value)
    if _is_number(value):
        try:
            return float(value)
        except OverflowError:
            return 0.0
    return 0.0


def _to_int(value: Any) -> int:
    if isinstance(value, str):
        if _INTEGER_RE.fullmatch(value) is None:
            return 0
        try:
            return int(value, 10)
        except ValueError:
            # past the interpreter's int/str digit limit
            return 0
    if _is_number(value):
        try:
            return int(value)
        except (OverflowError, ValueError):
            return 0
    return 0


def _to_str(value: Any) -> str:
    if isinstance(value, str):
        return value
    if _is_number(value):
        try:
            return _render_number(value)
        except ValueError:
            return ""
    return ""


_COERCERS = {
    FieldType.STRING: _to_str,
    FieldType.FLOAT: _to_float,
    FieldType.INTEGER: _to_int,
}


def coerce(value: Any, target: FieldType) -> Any:
    """Convert ``value`` to ``target``; unparseable input yields the zero value."""

    return _COERCERS[target](value)


def format_amount(value: int | float | Decimal | str) -> str:
    """Render an amount parameter as a plain decimal string (``0.00001``, ``6``).

    Unlike :func:`coerce` this is strict: text must be a finite decimal
    number and anything else raises ``ValueError``.
    """

    if isinstance(value, str):
        if _DECIMAL_RE.fullmatch(value) is None:
            raise ValueError(f"Invalid amount {value!r}")
        try:
            value = Decimal(value)
        except InvalidOperation as exc:
            raise ValueError(f"Invalid amount {value!r}") from exc
    if not _is_number(value):
        raise ValueError(f"Invalid amount {value!r}")
    finite = value.is_finite() if isinstance(value, Decimal) else math.isfinite(value)
    if not finite:
        raise ValueError(f"Amount must be finite, got {value!r}")
    return _render_number(value)
