"""Adapter from raw URL strings to the structured form the canonicalizer reads."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlsplit

from url_hash.errors import InvalidUrlError

_INVALID_URL = "Invalid URL"
_MAX_PORT = 65535
_HOSTLESS_SCHEMES = frozenset({"file"})


def _invalid(detail: str) -> InvalidUrlError:
    return InvalidUrlError(f"{_INVALID_URL}: {detail}")


@dataclass(frozen=True, slots=True)
class ParsedUrl:
    scheme: str
    host: str | None
    port: int | None
    path: str
    query: str | None = None
    fragment: str | None = None

    def __post_init__(self) -> None:
        if not self.scheme:
            raise _invalid("scheme cannot be empty")
        if self.port is not None and not 0 <= self.port <= _MAX_PORT:
            raise _invalid(f"port out of range: {self.port}")


def parse_url(url: str) -> ParsedUrl:
    """Split ``url`` into a :class:`ParsedUrl`.

    ``query`` and ``fragment`` are ``None`` when their delimiter is absent and
    ``""`` when the delimiter is present but empty. Userinfo is discarded.
    """
    text = url.strip() if url else ""
    if not text:
        raise _invalid("empty")

    try:
        parts = urlsplit(text)
        port = parts.port
    except ValueError as exc:
        raise _invalid(str(exc)) from exc

    scheme = parts.scheme.lower()
    if not scheme:
        raise _invalid("missing scheme")

    host = parts.hostname
    if host is None and scheme not in _HOSTLESS_SCHEMES:
        raise _invalid("missing host")

    before_fragment, hash_sign, _ = text.partition("#")
    query = parts.query if "?" in before_fragment else None
    fragment = parts.fragment if hash_sign else None

    return ParsedUrl(
        scheme=scheme,
        host=host,
        port=port,
        path=parts.path,
        query=query,
        fragment=fragment,
    )
