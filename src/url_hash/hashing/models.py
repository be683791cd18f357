"""Hash value types.

A :class:`UrlHash` holds the 32-byte SHA-256 digest of a canonical URL as four
unsigned 64-bit integers, each read little-endian from consecutive 8-byte groups of
the digest. :class:`UrlShortHash` and :class:`UrlVeryShortHash` are the first two and
the first one of those integers. They are obtained from a full hash by truncation
only, so a short hash always equals the leading bytes of the hash it came from.

Every type serializes three ways, each lossless:

- ``to_bytes()`` / ``from_bytes()``: the digest bytes in their original order
- ``hex()`` / ``from_hex()``: those bytes as lowercase hex
- ``str()`` / ``parse()``: the integers in decimal joined by ``-``

Equality is exact on every integer. No ordering is defined.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Self

_GROUP_SIZE = 8
_U64_MAX = 2**64 - 1
_DECIMAL_GROUP = re.compile(r"[0-9]+")


class _HashValue(ABC):
    __slots__ = ()

    GROUPS: ClassVar[int]

    def __post_init__(self) -> None:
        for value in self.values:
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= _U64_MAX:
                msg = f"hash values must be unsigned 64-bit integers, got {value!r}"
                raise ValueError(msg)

    @property
    @abstractmethod
    def values(self) -> tuple[int, ...]: ...

    def to_bytes(self) -> bytes:
        return b"".join(value.to_bytes(_GROUP_SIZE, "little") for value in self.values)

    def hex(self) -> str:
        return self.to_bytes().hex()

    def __str__(self) -> str:
        return "-".join(str(value) for value in self.values)

    @classmethod
    def from_bytes(cls, data: bytes) -> Self:
        expected = cls.GROUPS * _GROUP_SIZE
        if len(data) != expected:
            msg = f"{cls.__name__} requires exactly {expected} bytes, got {len(data)}"
            raise ValueError(msg)
        values = (
            int.from_bytes(data[offset : offset + _GROUP_SIZE], "little")
            for offset in range(0, expected, _GROUP_SIZE)
        )
        return cls(*values)

    @classmethod
    def from_hex(cls, text: str) -> Self:
        try:
            data = bytes.fromhex(text)
        except ValueError as exc:
            msg = f"{cls.__name__} hex is malformed: {text!r}"
            raise ValueError(msg) from exc
        return cls.from_bytes(data)

    @classmethod
    def parse(cls, text: str) -> Self:
        parts = text.split("-")
        if len(parts) != cls.GROUPS or not all(_DECIMAL_GROUP.fullmatch(part) for part in parts):
            msg = f"{cls.__name__} expects {cls.GROUPS} decimal values joined by '-', got {text!r}"
            raise ValueError(msg)
        return cls(*(int(part) for part in parts))


@dataclass(frozen=True, slots=True)
class UrlVeryShortHash(_HashValue):
    """The first 8 bytes of a :class:`UrlHash`."""

    GROUPS: ClassVar[int] = 1

    v1: int

    @property
    def values(self) -> tuple[int, ...]:
        return (self.v1,)


@dataclass(frozen=True, slots=True)
class UrlShortHash(_HashValue):
    """The first 16 bytes of a :class:`UrlHash`."""

    GROUPS: ClassVar[int] = 2

    v1: int
    v2: int

    @property
    def values(self) -> tuple[int, ...]:
        return (self.v1, self.v2)

    def very_short(self) -> UrlVeryShortHash:
        return UrlVeryShortHash(self.v1)

    def starts_with(self, very_short_hash: UrlVeryShortHash) -> bool:
        return self.v1 == very_short_hash.v1


@dataclass(frozen=True, slots=True)
class UrlHash(_HashValue):
    """SHA-256 of a canonical URL as four little-endian unsigned 64-bit integers."""

    GROUPS: ClassVar[int] = 4

    v1: int
    v2: int
    v3: int
    v4: int

    @property
    def values(self) -> tuple[int, ...]:
        return (self.v1, self.v2, self.v3, self.v4)

    def short(self) -> UrlShortHash:
        return UrlShortHash(self.v1, self.v2)

    def very_short(self) -> UrlVeryShortHash:
        return UrlVeryShortHash(self.v1)

    def starts_with(self, short_hash: UrlShortHash) -> bool:
        return self.v1 == short_hash.v1 and self.v2 == short_hash.v2

    def starts_with_just(self, very_short_hash: UrlVeryShortHash) -> bool:
        return self.v1 == very_short_hash.v1
