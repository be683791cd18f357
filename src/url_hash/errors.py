"""Errors raised while turning URLs into hashes."""

from __future__ import annotations


class UrlHashError(ValueError):
    """Base class for url_hash errors."""


class InvalidUrlError(UrlHashError):
    """Raised when a URL cannot be parsed or its host cannot be encoded."""
