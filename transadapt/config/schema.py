"""TypedDict definitions for the transadapt configuration.

These types mirror ``DEFAULT_CONFIG`` and back ``ConfigValidator``.
"""

from typing import Any, Literal, MutableMapping, TypedDict

__all__ = [
    "RetryConfig",
    "MockProviderConfig",
    "DictionaryProviderConfig",
    "LibreTranslateProviderConfig",
    "ProvidersConfig",
    "TranslationConfig",
    "LoggingConfig",
    "CoreConfig",
]


class RetryConfig(TypedDict, total=False):
    max_attempts: int
    base_delay: float
    multiplier: float


class MockProviderConfig(TypedDict, total=False):
    chunk_delay: float
    response_delay: float


class DictionaryProviderConfig(TypedDict, total=False):
    chunk_delay: float


class LibreTranslateProviderConfig(TypedDict, total=False):
    endpoint: str
    api_key: str | None
    timeout: float | None


class ProvidersConfig(TypedDict, total=False):
    mock: MockProviderConfig
    dictionary: DictionaryProviderConfig
    libretranslate: LibreTranslateProviderConfig
    google: MutableMapping[str, Any]


class _TranslationConfigRequired(TypedDict):
    provider: Literal["mock", "dictionary", "libretranslate", "google"]


class TranslationConfig(_TranslationConfigRequired, total=False):
    source_language: str
    target_language: str
    retry: RetryConfig
    providers: ProvidersConfig


class LoggingConfig(TypedDict, total=False):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    format: str


class _CoreConfigRequired(TypedDict):
    translation: TranslationConfig


class CoreConfig(_CoreConfigRequired, total=False):
    logging: LoggingConfig
