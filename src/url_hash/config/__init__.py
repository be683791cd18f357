from .errors import ConfigError
from .loader import load_config
from .models import HashingConfig

__all__ = [
    "ConfigError",
    "HashingConfig",
    "load_config",
]
