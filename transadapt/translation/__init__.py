"""
翻訳アダプタ

入れ替え可能な複数の翻訳バックエンド（モック、辞書、LibreTranslate、Google）を
1 つのプロバイダインターフェースで扱い、一時的エラーのリトライと
キャンセル可能なインクリメンタル配信を提供する。

Usage:
    import asyncio
    from contextlib import aclosing

    from transadapt.translation import TranslationRequest, TranslatorFactory

    async def main():
        async with TranslatorFactory.create_translator("mock") as translator:
            request = TranslationRequest("Hello world", "en", "uk")

            response = await translator.translate(request)
            print(response.text)  # "[uk] Hello world"

            async with aclosing(translator.translate_incrementally(request)) as stream:
                async for partial in stream:
                    print(partial.text, partial.is_final)
            # [uk] Hello False
            # [uk] Hello world True

    asyncio.run(main())
"""

from __future__ import annotations

from .adapter import ResilientTranslator
from .base import TranslationProvider
from .cancellation import CancellationToken
from .exceptions import (
    ProviderClosedError,
    RequestValidationError,
    TranslationAuthError,
    TranslationBackendError,
    TranslationCancelledError,
    TranslationError,
    TranslationNetworkError,
    TranslationTimeoutError,
    UnsupportedLanguagePairError,
    is_transient,
)
from .facade import Translator
from .factory import TranslatorFactory
from .lang_codes import (
    get_language_name,
    is_valid_tag,
    normalize_for_google,
    normalize_for_libretranslate,
    normalize_tag,
    to_iso639_1,
)
from .metadata import ProviderInfo, TranslatorMetadata
from .request import TranslationRequest
from .result import TranslationResponse
from .retry import RetryPolicy, retry_async
from .segmenter import iter_token_prefixes

__all__ = [
    # Core classes
    "TranslationRequest",
    "TranslationResponse",
    "TranslationProvider",
    "ResilientTranslator",
    "Translator",
    "TranslatorFactory",
    "TranslatorMetadata",
    "ProviderInfo",
    "CancellationToken",
    # Exceptions
    "TranslationError",
    "RequestValidationError",
    "TranslationNetworkError",
    "TranslationTimeoutError",
    "TranslationBackendError",
    "TranslationAuthError",
    "UnsupportedLanguagePairError",
    "ProviderClosedError",
    "TranslationCancelledError",
    "is_transient",
    # Language code utilities
    "is_valid_tag",
    "normalize_tag",
    "to_iso639_1",
    "normalize_for_google",
    "normalize_for_libretranslate",
    "get_language_name",
    # Retry
    "RetryPolicy",
    "retry_async",
    # Streaming helpers
    "iter_token_prefixes",
]
