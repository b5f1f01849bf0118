"""
Exception types raised by the RPC client.
"""

from __future__ import annotations

NO_RESULT_CODE = 500
NO_RESULT_MESSAGE = "No result"


class RPCError(Exception):
    """Base exception for RPC problems."""


class RPCRequestError(RPCError):
    """Raised for HTTP-level failures."""

    def __init__(self, status: int, body: str):
        super().__init__(f"RPC HTTP error {status}: {body}")
        self.status = status
        self.body = body


class RateLimitError(RPCRequestError):
    """Raised when the RPC server rejects the request due to rate limiting."""


class RPCDecodeError(RPCError, ValueError):
    """Raised when a response body is not a JSON object."""


class RPCResponseError(RPCError):
    """Raised when the JSON-RPC envelope carries a non-zero error code."""

    def __init__(self, code: int, message: str):
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RPCResponseError):
            return NotImplemented
        return (self.code, self.message) == (other.code, other.message)

    def __hash__(self) -> int:
        return hash((self.code, self.message))


class NoResultError(RPCResponseError):
    """The envelope was clean but held no usable ``result``.

    Synthesized by the client, never sent by the daemon.
    """

    def __init__(self) -> None:
        super().__init__(NO_RESULT_CODE, NO_RESULT_MESSAGE)
