"""SHA-256 digest of a canonical URL, reshaped into :class:`UrlHash`."""

from __future__ import annotations

import hashlib
from typing import TYPE_CHECKING

from url_hash.canonical import canonicalize
from url_hash.hashing.models import UrlHash
from url_hash.parsing import parse_url

if TYPE_CHECKING:
    from url_hash.canonical import CanonicalizationConfig


def digest(canonical: bytes) -> UrlHash:
    return UrlHash.from_bytes(hashlib.sha256(canonical).digest())


def hash_url(url: str, *, config: CanonicalizationConfig | None = None) -> UrlHash:
    return digest(canonicalize(parse_url(url), config=config))
