from __future__ import annotations

import re
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_validator

from url_hash.canonical import DEFAULT_PORTS, CanonicalizationConfig, merge_ports

if TYPE_CHECKING:
    from collections.abc import Mapping

_SCHEME_PATTERN = re.compile(r"[a-z][a-z0-9+.-]*")
_MAX_PORT = 65535


class HashingConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    default_ports: dict[str, int] = Field(default_factory=lambda: dict(DEFAULT_PORTS))

    @field_validator("default_ports")
    @classmethod
    def _validate_default_ports(cls, value: dict[str, int]) -> dict[str, int]:
        ports: dict[str, int] = {}
        for scheme, port in value.items():
            lowered = scheme.lower()
            if not _SCHEME_PATTERN.fullmatch(lowered):
                msg = f"invalid scheme: {scheme!r}"
                raise ValueError(msg)
            if not 0 <= port <= _MAX_PORT:
                msg = f"port out of range for {lowered}: {port}"
                raise ValueError(msg)
            ports[lowered] = port
        return ports

    def to_canonicalization_config(self) -> CanonicalizationConfig:
        return CanonicalizationConfig(default_ports=merge_ports(self.default_ports))

    @classmethod
    def from_raw(cls, data: Mapping[str, object]) -> HashingConfig:
        return cls.model_validate(data)
