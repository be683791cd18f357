from __future__ import annotations

from factory.base import Factory

from url_hash.parsing import ParsedUrl


class ParsedUrlFactory(Factory[ParsedUrl]):
    class Meta:
        model = ParsedUrl

    scheme = "https"
    host = "example.com"
    port = None
    path = "/"
    query = None
    fragment = None
