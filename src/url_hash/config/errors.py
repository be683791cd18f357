"""Config-related errors."""

from __future__ import annotations


class ConfigError(ValueError):
    """Raised when configuration input is invalid."""
