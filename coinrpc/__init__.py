"""Typed JSON-RPC wallet client for Bitcoin-family coin daemons."""

from .client import WalletClient
from .coerce import FieldType, coerce, format_amount
from .config import ClientConfig, ConfigError, load_config
from .confirmations import is_confirmed
from .envelope import ResultShape, check_error, extract_result
from .errors import (
    NO_RESULT_CODE,
    NoResultError,
    RateLimitError,
    RPCDecodeError,
    RPCError,
    RPCRequestError,
    RPCResponseError,
)
from .records import WalletInfo
from .transport import HTTPTransport

__all__ = [
    "ClientConfig",
    "ConfigError",
    "FieldType",
    "HTTPTransport",
    "NO_RESULT_CODE",
    "NoResultError",
    "RPCDecodeError",
    "RPCError",
    "RPCRequestError",
    "RPCResponseError",
    "RateLimitError",
    "ResultShape",
    "WalletClient",
    "WalletInfo",
    "check_error",
    "coerce",
    "extract_result",
    "format_amount",
    "is_confirmed",
    "load_config",
]
