from url_hash.canonical.canonicalizer import (
    CANONICALIZATION_VERSION,
    CanonicalizationConfig,
    canonical_url,
    canonicalize,
    remove_dot_segments,
)
from url_hash.canonical.ports import DEFAULT_PORTS, default_port, merge_ports

__all__ = [
    "CANONICALIZATION_VERSION",
    "DEFAULT_PORTS",
    "CanonicalizationConfig",
    "canonical_url",
    "canonicalize",
    "default_port",
    "merge_ports",
    "remove_dot_segments",
]
