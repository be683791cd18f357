"""Stable, cross-platform hashes of URL values.

A URL is canonicalized to a fixed byte string, hashed with SHA-256, and the digest
is held as four little-endian unsigned 64-bit integers::

    >>> from url_hash import hash_url
    >>> value = hash_url("https://Example.COM:443/a/../b")
    >>> value == hash_url("https://example.com/b")
    True
    >>> value.starts_with(value.short())
    True
"""

from url_hash.canonical import (
    CANONICALIZATION_VERSION,
    DEFAULT_PORTS,
    CanonicalizationConfig,
    canonical_url,
    canonicalize,
)
from url_hash.errors import InvalidUrlError, UrlHashError
from url_hash.hashing import UrlHash, UrlShortHash, UrlVeryShortHash, digest, hash_url
from url_hash.parsing import ParsedUrl, parse_url

__all__ = [
    "CANONICALIZATION_VERSION",
    "DEFAULT_PORTS",
    "CanonicalizationConfig",
    "InvalidUrlError",
    "ParsedUrl",
    "UrlHash",
    "UrlHashError",
    "UrlShortHash",
    "UrlVeryShortHash",
    "canonical_url",
    "canonicalize",
    "digest",
    "hash_url",
    "parse_url",
]
