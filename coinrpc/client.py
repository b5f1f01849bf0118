"""
Wallet JSON-RPC client for Bitcoin-family coin daemons.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from decimal import Decimal
from typing import Any, Sequence

from .coerce import format_amount
from .config import ClientConfig
from .confirmations import is_confirmed
from .envelope import ResultShape, check_error, extract_result
from .errors import RateLimitError, RPCDecodeError, RPCRequestError
from .protocol import decode_envelope, encode_request
from .records import WalletInfo
from .transport import HTTPTransport, Transport

log = logging.getLogger(__name__)

_AUTH_FAILURES = {401, 403}


class WalletClient:
    """Thin typed client over a daemon's wallet RPC methods.

    Holds only its configuration and transport, so one instance can be shared
    between threads.
    """

    def __init__(self, config: ClientConfig, transport: Transport | None = None):
        self.config = replace(config)
        self._confirmations = config.confirmations
        self.transport = transport or HTTPTransport(
            config.url,
            config.username or None,
            config.password or None,
            config.timeout,
        )

    @classmethod
    def from_url(cls, url: str, confirmations: int = 6) -> "WalletClient":
        config = ClientConfig(url=url, confirmations=confirmations)
        config.validate()
        return cls(config)

    @property
    def confirmations(self) -> int:
        return self._confirmations

    def _request(self, method: str, params: Sequence[Any] | None = None) -> dict[str, Any]:
        """Post one request and return its envelope once the error gate passes."""

        log.debug("RPC %s", method)
        payload = encode_request(method, params, request_id=self.config.request_id)
        status, body = self.transport.post(payload)
        if status == 429:
            raise RateLimitError(status, body.decode("utf-8", "replace"))
        if status in _AUTH_FAILURES:
            raise RPCRequestError(status, body.decode("utf-8", "replace"))
        try:
            envelope = decode_envelope(body)
        except RPCDecodeError as exc:
            if status != 200:
                raise RPCRequestError(status, body.decode("utf-8", "replace")) from exc
            raise
        error = check_error(envelope)
        if error is not None:
            log.debug("RPC %s failed: %s", method, error)
            raise error
        if status != 200:
            raise RPCRequestError(status, body.decode("utf-8", "replace"))
        return envelope

    def call(self, method: str, params: Sequence[Any] | None = None) -> Any:
        """Invoke an arbitrary method and return its raw ``result``."""

        return self._request(method, params).get("result")

    def create_address(self) -> str:
        envelope = self._request("getnewaddress")
        return extract_result(envelope, ResultShape.STRING)

    def get_balance(self) -> float:
        envelope = self._request("getbalance")
        return extract_result(envelope, ResultShape.NUMBER)

    def get_balance_by_address(self, address: str) -> float:
        envelope = self._request("getreceivedbyaddress", [address, self.confirmations])
        return extract_result(envelope, ResultShape.NUMBER)

    def get_wallet_info(self) -> WalletInfo:
        envelope = self._request("getwalletinfo")
        return WalletInfo.from_json(extract_result(envelope, ResultShape.OBJECT))

    def send_to_address(self, address: str, amount: float | Decimal | str) -> str:
        envelope = self._request("sendtoaddress", [address, format_amount(amount)])
        return extract_result(envelope, ResultShape.STRING)

    def get_transaction(self, txid: str) -> dict[str, Any]:
        envelope = self._request("gettransaction", [txid])
        return extract_result(envelope, ResultShape.OPAQUE)

    def check_transaction(self, txid: str) -> bool:
        envelope = self._request("gettransaction", [txid])
        transaction = extract_result(envelope, ResultShape.OBJECT)
        return is_confirmed(transaction, self.confirmations)

    def set_fee(self, fee: float | Decimal | str) -> bool:
        envelope = self._request("settxfee", [format_amount(fee)])
        return extract_result(envelope, ResultShape.BOOLEAN)
