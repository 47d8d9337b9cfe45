"""Default configuration values for transadapt."""

from __future__ import annotations

import logging
import os
from copy import deepcopy
from typing import Any, Dict, Mapping

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "translation": {
        "provider": "mock",
        "source_language": "en",
        "target_language": "uk",
        "retry": {
            "max_attempts": 3,
            "base_delay": 0.2,
            "multiplier": 2.0,
        },
        "providers": {
            "mock": {
                "chunk_delay": 0.05,
            },
            "dictionary": {
                "chunk_delay": 0.0,
            },
            "libretranslate": {
                "endpoint": "http://localhost:5000/translate",
                "api_key": None,
                # None: TRANSADAPT_HTTP_TIMEOUT or 10s
                "timeout": None,
            },
            "google": {},
        },
    },
    "logging": {
        "level": "WARNING",
        "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
    },
}

# environment variable -> config path
ENV_OVERRIDES: Dict[str, tuple[str, ...]] = {
    "TRANSADAPT_PROVIDER": ("translation", "provider"),
    "TRANSADAPT_SOURCE_LANG": ("translation", "source_language"),
    "TRANSADAPT_TARGET_LANG": ("translation", "target_language"),
    "TRANSADAPT_HTTP_ENDPOINT": ("translation", "providers", "libretranslate", "endpoint"),
    "TRANSADAPT_API_KEY": ("translation", "providers", "libretranslate", "api_key"),
    "TRANSADAPT_MAX_ATTEMPTS": ("translation", "retry", "max_attempts"),
    "TRANSADAPT_LOG_LEVEL": ("logging", "level"),
}

_INT_SETTINGS = {"TRANSADAPT_MAX_ATTEMPTS"}


def get_default_config() -> Dict[str, Any]:
    """Return a deep copy of the default configuration."""
    return deepcopy(DEFAULT_CONFIG)


def merge_config(base: Dict[str, Any], override: Dict[str, Any] | None) -> Dict[str, Any]:
    """
    Recursively merge two configuration dictionaries.

    Args:
        base: The base configuration that provides default values.
        override: Overrides coming from callers (can be None).

    Returns:
        A new dictionary containing the merged configuration.
    """
    if override is None:
        return deepcopy(base)

    merged = deepcopy(base)
    for key, value in override.items():
        if (
            key in merged
            and isinstance(merged[key], dict)
            and isinstance(value, dict)
        ):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = deepcopy(value)
    return merged


def _env_overrides(environ: Mapping[str, str]) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for env_name, path in ENV_OVERRIDES.items():
        raw = environ.get(env_name)
        if raw is None or raw == "":
            continue

        value: Any = raw
        if env_name in _INT_SETTINGS:
            try:
                value = int(raw)
            except ValueError:
                logger.warning("Invalid %s value '%s', ignoring", env_name, raw)
                continue

        node = overrides
        for key in path[:-1]:
            node = node.setdefault(key, {})
        node[path[-1]] = value
    return overrides


def load_config(
    overrides: Dict[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
) -> Dict[str, Any]:
    """
    Build the effective configuration.

    Precedence (lowest to highest): defaults, environment variables, overrides.

    Args:
        overrides: Overrides coming from callers (e.g. CLI flags).
        environ: Environment mapping (defaults to ``os.environ``).
    """
    environ = os.environ if environ is None else environ
    config = merge_config(DEFAULT_CONFIG, _env_overrides(environ))
    return merge_config(config, overrides)
