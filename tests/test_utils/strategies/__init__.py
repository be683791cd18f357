from __future__ import annotations

from tests.test_utils.strategies.hashes import u64_strategy, url_hash_strategy
from tests.test_utils.strategies.url import (
    host_strategy,
    parsed_url_strategy,
    url_strategy,
)

__all__ = [
    "host_strategy",
    "parsed_url_strategy",
    "u64_strategy",
    "url_hash_strategy",
    "url_strategy",
]
