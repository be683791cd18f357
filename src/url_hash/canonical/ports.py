"""Default ports for schemes whose port is elided from the canonical form."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

DEFAULT_PORTS: Mapping[str, int] = MappingProxyType(
    {
        "ftp": 21,
        "http": 80,
        "https": 443,
        "ws": 80,
        "wss": 443,
    },
)


def default_port(scheme: str, ports: Mapping[str, int] | None = None) -> int | None:
    table = DEFAULT_PORTS if ports is None else ports
    return table.get(scheme)


def merge_ports(*tables: Mapping[str, int]) -> Mapping[str, int]:
    merged: dict[str, int] = {}
    for table in tables:
        merged.update({scheme.lower(): port for scheme, port in table.items()})
    return MappingProxyType(merged)
