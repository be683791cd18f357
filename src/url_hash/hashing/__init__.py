from url_hash.hashing.codec import digest, hash_url
from url_hash.hashing.models import UrlHash, UrlShortHash, UrlVeryShortHash

__all__ = [
    "UrlHash",
    "UrlShortHash",
    "UrlVeryShortHash",
    "digest",
    "hash_url",
]
