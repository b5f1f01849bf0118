"""
Settlement check for wallet transactions.
"""

from __future__ import annotations

from typing import Any, Mapping

from .coerce import FieldType, coerce
from .errors import NoResultError


def is_confirmed(transaction: Mapping[str, Any], threshold: int) -> bool:
    """True once ``confirmations`` reaches ``threshold`` (inclusive)."""

    if "confirmations" not in transaction:
        raise NoResultError()
    count = coerce(transaction["confirmations"], FieldType.INTEGER)
    return count >= threshold
