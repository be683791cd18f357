from __future__ import annotations

import tomllib
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from url_hash.canonical import DEFAULT_PORTS

from .errors import ConfigError
from .models import HashingConfig

if TYPE_CHECKING:
    from pathlib import Path


def _parse_default_ports(data: dict[str, Any]) -> dict[str, object]:
    ports = data.get("default_ports", {})
    if not isinstance(ports, dict):
        msg = "default_ports must be a table"
        raise ConfigError(msg)

    extend = data.get("extend_defaults", True)
    if not isinstance(extend, bool):
        msg = "extend_defaults must be a boolean"
        raise ConfigError(msg)

    if extend:
        return {**DEFAULT_PORTS, **ports}
    return dict(ports)


def load_config(path: Path) -> HashingConfig:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = "toml parse error"
        raise ConfigError(msg) from exc
    except OSError as exc:
        msg = f"config not readable: {path}"
        raise ConfigError(msg) from exc

    unknown = set(data) - {"default_ports", "extend_defaults"}
    if unknown:
        msg = f"unknown config keys: {', '.join(sorted(unknown))}"
        raise ConfigError(msg)

    try:
        return HashingConfig.from_raw({"default_ports": _parse_default_ports(data)})
    except ValidationError as exc:
        msg = "invalid config"
        raise ConfigError(msg) from exc
