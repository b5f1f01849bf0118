"""
Configuration helpers for the RPC client.

The config loader starts from deterministic defaults, then merges a user
provided JSON file, environment overrides prefixed with ``COINRPC_`` and
finally explicit overrides from the caller.
"""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any
from urllib.parse import urlsplit

ENV_PREFIX = "COINRPC_"


class ConfigError(Exception):
    """Raised when configuration validation fails."""


def _expand_path(value: str) -> Path:
    return Path(os.path.expandvars(os.path.expanduser(value))).resolve()


@dataclass(slots=True)
class ClientConfig:
    url: str = "http://127.0.0.1:14022/"
    username: str = ""
    password: str = ""
    confirmations: int = 6
    timeout: float = 30.0
    request_id: str = "coinrpc"

    def validate(self) -> None:
        parts = urlsplit(self.url)
        if parts.scheme not in ("http", "https"):
            raise ConfigError(f"Unsupported RPC URL scheme {parts.scheme!r}")
        if not parts.hostname:
            raise ConfigError(f"RPC URL {self.url!r} has no host")
        if self.confirmations < 0:
            raise ConfigError("confirmations must be >= 0")
        if self.timeout <= 0:
            raise ConfigError("timeout must be > 0")

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        if data["password"]:
            data["password"] = "***"
        return data


def load_config(path: Path | None = None, *, overrides: dict[str, Any] | None = None) -> ClientConfig:
    """Load configuration from disk, environment and explicit overrides."""

    env_path = os.getenv(f"{ENV_PREFIX}CONFIG")
    cfg_path = path or (_expand_path(env_path) if env_path else None)
    merged: dict[str, Any] = {}
    if cfg_path is not None:
        if not Path(cfg_path).exists():
            raise ConfigError(f"Config file {cfg_path} not found")
        with open(cfg_path, "rb") as fh:
            try:
                data = json.load(fh)
            except json.JSONDecodeError as exc:
                raise ConfigError(f"Config file {cfg_path} is not valid JSON") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {cfg_path} must hold a JSON object")
        merged.update(data)

    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX):
            continue
        name = key[len(ENV_PREFIX) :].lower()
        if name == "config":
            continue
        merged[name] = value

    if overrides:
        merged.update({key: value for key, value in overrides.items() if value is not None})

    config = ClientConfig()
    _apply_dict(config, merged)
    config.validate()
    return config


def _apply_dict(config: ClientConfig, data: dict[str, Any]) -> None:
    for key, value in data.items():
        if not hasattr(config, key):
            raise ConfigError(f"Unknown config field {key}")
        setattr(config, key, _coerce_value(getattr(config, key), value))


def _coerce_value(current: Any, value: Any) -> Any:
    target_type = type(current)
    if target_type in {int, float}:
        if isinstance(value, bool):
            raise ConfigError(f"Invalid numeric value {value!r}")
        try:
            return target_type(value)
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Invalid numeric value {value!r}") from exc
    if target_type is str:
        return str(value)
    return value
