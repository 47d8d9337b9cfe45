"""Canonical re-exports for the transadapt public API surface.

呼び出し側や外部ツールが `transadapt` 直下から主要シンボルを取得できるようにする。

- Translator, TranslatorFactory: 高レベル API と組み立て
- TranslationRequest, TranslationResponse: リクエスト／結果型
- TranslationProvider, ResilientTranslator: プロバイダとレジリエンスラッパー
- CancellationToken: 協調的キャンセル
"""

from .translation import (
    CancellationToken,
    ProviderClosedError,
    RequestValidationError,
    ResilientTranslator,
    RetryPolicy,
    TranslationBackendError,
    TranslationCancelledError,
    TranslationError,
    TranslationNetworkError,
    TranslationProvider,
    TranslationRequest,
    TranslationResponse,
    Translator,
    TranslatorFactory,
)

__version__ = "0.1.0"

__all__ = [
    "CancellationToken",
    "ProviderClosedError",
    "RequestValidationError",
    "ResilientTranslator",
    "RetryPolicy",
    "TranslationBackendError",
    "TranslationCancelledError",
    "TranslationError",
    "TranslationNetworkError",
    "TranslationProvider",
    "TranslationRequest",
    "TranslationResponse",
    "Translator",
    "TranslatorFactory",
]
