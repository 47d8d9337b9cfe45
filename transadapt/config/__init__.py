"""Configuration helpers (defaults, merging, environment overrides, validation)."""

from .defaults import DEFAULT_CONFIG, get_default_config, load_config, merge_config
from .validator import ConfigValidator, ValidationError

__all__ = [
    "DEFAULT_CONFIG",
    "get_default_config",
    "load_config",
    "merge_config",
    "ConfigValidator",
    "ValidationError",
]
