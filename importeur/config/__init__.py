"""Configuration loading and validation package."""

from .loader import ConfigError, DEFAULT_CONFIG, load_config, get_config_value
from .validator import ValidationError, validate_config

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG",
    "load_config",
    "get_config_value",
    "ValidationError",
    "validate_config",
]
