"""
Typed records built from wallet RPC results.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping

from .coerce import FieldType, coerce

# (wire key, attribute, type)
WALLET_INFO_FIELDS: tuple[tuple[str, str, FieldType], ...] = (
    ("hdmasterkeyid", "hd_master_key_id", FieldType.STRING),
    ("walletname", "wallet_name", FieldType.STRING),
    ("walletversion", "wallet_version", FieldType.STRING),
    ("balance", "balance", FieldType.FLOAT),
    ("unconfirmed_balance", "unconfirmed_balance", FieldType.FLOAT),
    ("keypoololdest", "keypool_oldest", FieldType.FLOAT),
    ("keypoolsize", "keypool_size", FieldType.INTEGER),
    ("immature_balance", "immature_balance", FieldType.FLOAT),
    ("txcount", "tx_count", FieldType.INTEGER),
    ("keypoolsize_hd_internal", "keypool_size_hd_internal", FieldType.INTEGER),
    ("paytxfee", "pay_tx_fee", FieldType.FLOAT),
)


@dataclass(frozen=True, slots=True)
class WalletInfo:
    hd_master_key_id: str = ""
    wallet_name: str = ""
    wallet_version: str = ""
    balance: float = 0.0
    unconfirmed_balance: float = 0.0
    keypool_oldest: float = 0.0
    keypool_size: int = 0
    immature_balance: float = 0.0
    tx_count: int = 0
    keypool_size_hd_internal: int = 0
    pay_tx_fee: float = 0.0

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "WalletInfo":
        """Build a record from a ``getwalletinfo`` result.

        Missing keys keep their defaults, unknown keys are ignored and values
        that do not parse degrade to zero; this never raises.
        """

        values: dict[str, Any] = {}
        for key, attr, field_type in WALLET_INFO_FIELDS:
            if key in obj:
                values[attr] = coerce(obj[key], field_type)
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        return {key: data[attr] for key, attr, _ in WALLET_INFO_FIELDS}
