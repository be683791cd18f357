"""URL canonicalization.

The canonical form is the exact byte string fed to SHA-256, so every step below is
part of the hashing protocol. Changing any of them changes every hash; bump
``CANONICALIZATION_VERSION`` if that ever happens.

1. lower-case the scheme
2. lower-case the host
3. IDNA-encode non-ASCII host labels (UTS #46, nontransitional)
4. drop the port if it is the scheme's default
5. remove ``.`` and ``..`` path segments
6. replace an empty path with ``/``
7. percent-encode path, query and fragment with the WHATWG encode sets
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING
from urllib.parse import quote

import idna

from url_hash.canonical.ports import DEFAULT_PORTS, default_port, merge_ports
from url_hash.errors import InvalidUrlError
from url_hash.parsing import parse_url

if TYPE_CHECKING:
    from collections.abc import Mapping

    from url_hash.parsing import ParsedUrl

CANONICALIZATION_VERSION = 1

_INVALID_URL = "Invalid URL"
_ACE_PREFIX = "xn--"
# Characters left literal besides alphanumerics and "-._~".
_PATH_SAFE = "!$%&'()*+,/:;=@[\\]^|"
_QUERY_SAFE = "!$%&'()*+,/:;=?@[\\]^`{|}"
_SPECIAL_QUERY_SAFE = _QUERY_SAFE.replace("'", "")
_FRAGMENT_SAFE = "!#$%&'()*+,/:;=?@[\\]^{|}"
_SPECIAL_SCHEMES = frozenset({"file", "ftp", "http", "https", "ws", "wss"})
_ESCAPE_PATTERN = re.compile(r"%([0-9a-fA-F]{2})")


@dataclass(frozen=True, slots=True)
class CanonicalizationConfig:
    default_ports: Mapping[str, int] = field(default_factory=lambda: DEFAULT_PORTS)

    def __post_init__(self) -> None:
        object.__setattr__(self, "default_ports", merge_ports(self.default_ports))


def canonicalize(parsed: ParsedUrl, *, config: CanonicalizationConfig | None = None) -> bytes:
    config = config or CanonicalizationConfig()

    scheme = parsed.scheme.lower()
    host = _normalize_host(parsed.host)
    port = _normalize_port(scheme, parsed.port, config.default_ports)
    path = _normalize_path(parsed.path)
    query_safe = _SPECIAL_QUERY_SAFE if scheme in _SPECIAL_SCHEMES else _QUERY_SAFE

    parts = [scheme, "://", host]
    if port is not None:
        parts.append(f":{port}")
    parts.append(_encode(path, safe=_PATH_SAFE))
    if parsed.query is not None:
        parts.append(f"?{_encode(parsed.query, safe=query_safe)}")
    if parsed.fragment is not None:
        parts.append(f"#{_encode(parsed.fragment, safe=_FRAGMENT_SAFE)}")

    canonical = "".join(parts)
    return canonical.encode("utf-8")


def canonical_url(url: str, *, config: CanonicalizationConfig | None = None) -> str:
    return canonicalize(parse_url(url), config=config).decode("utf-8")


def remove_dot_segments(path: str) -> str:
    """Resolve ``.`` and ``..`` segments; ``..`` never climbs above the root."""
    if not path:
        return ""

    absolute = path.startswith("/")
    segments = path.split("/")
    if absolute:
        segments = segments[1:]

    resolved: list[str] = []
    for segment in segments:
        if segment == ".":
            continue
        if segment == "..":
            if resolved:
                resolved.pop()
            continue
        resolved.append(segment)

    if segments[-1] in {".", ".."}:
        resolved.append("")

    joined = "/".join(resolved)
    return f"/{joined}" if absolute else joined


def _normalize_host(host: str | None) -> str:
    if not host:
        return ""
    host = host.lower()
    if ":" in host:
        return f"[{host.strip('[]')}]"
    if host.isascii():
        return host
    try:
        mapped = idna.uts46_remap(host, std3_rules=False, transitional=False)
    except UnicodeError as exc:
        msg = f"{_INVALID_URL}: cannot encode host {host!r}"
        raise InvalidUrlError(msg) from exc
    return ".".join(_encode_label(label) for label in mapped.split("."))


def _encode_label(label: str) -> str:
    if label.isascii():
        return label
    return _ACE_PREFIX + label.encode("punycode").decode("ascii")


def _normalize_port(scheme: str, port: int | None, ports: Mapping[str, int]) -> int | None:
    if port is None or port == default_port(scheme, ports):
        return None
    return port


def _normalize_path(path: str) -> str:
    path = remove_dot_segments(path)
    if not path:
        return "/"
    if not path.startswith("/"):
        return f"/{path}"
    return path


def _encode(value: str, *, safe: str) -> str:
    try:
        encoded = quote(value, safe=safe)
    except UnicodeEncodeError as exc:
        msg = f"{_INVALID_URL}: cannot percent-encode {value!r}"
        raise InvalidUrlError(msg) from exc
    return _ESCAPE_PATTERN.sub(lambda match: f"%{match.group(1).upper()}", encoded)
