"""
Google Translate 実装

deep-translator ライブラリを使用した Google Translate API のラッパー。
無料枠で動作し、ほぼ全言語ペアに対応。
"""

from __future__ import annotations

import asyncio
from typing import List, Optional, Tuple

from deep_translator import GoogleTranslator as DeepGoogleTranslator
from deep_translator.exceptions import (
    RequestError,
    TooManyRequests,
    TranslationNotFound,
)

from ..base import TranslationProvider
from ..cancellation import CancellationToken, guard
from ..exceptions import (
    TranslationBackendError,
    TranslationNetworkError,
    UnsupportedLanguagePairError,
)
from ..lang_codes import normalize_for_google, to_iso639_1
from ..request import TranslationRequest
from ..result import TranslationResponse


class GoogleProvider(TranslationProvider):
    """
    Google Translate (via deep-translator)

    deep-translator は同期 API のため、呼び出しは asyncio.to_thread で実行する。
    リトライは ResilientTranslator が行うため、ここでは行わない。
    ストリーミング API は持たないため、インクリメンタル翻訳は最終結果 1 件のみ。

    Examples:
        >>> provider = GoogleProvider()
        >>> response = await provider.translate(TranslationRequest("Hello", "en", "uk"))
        >>> print(response.text)
        "Привіт"
    """

    async def _translate(
        self,
        request: TranslationRequest,
        cancel_token: Optional[CancellationToken],
    ) -> TranslationResponse:
        """
        テキストを翻訳

        Raises:
            UnsupportedLanguagePairError: 同一言語が指定された場合
            TranslationNetworkError: API リクエスト失敗、レート制限
            TranslationBackendError: その他の翻訳エラー
        """
        # 入力バリデーション: 同一言語
        if to_iso639_1(request.source_lang) == to_iso639_1(request.target_lang):
            raise UnsupportedLanguagePairError(
                request.source_lang, request.target_lang, self.get_translator_name()
            )

        translated = await guard(
            asyncio.to_thread(self._translate_blocking, request),
            cancel_token,
        )
        return TranslationResponse.final(translated, request)

    def _translate_blocking(self, request: TranslationRequest) -> str:
        """deep-translator を呼び出す（ワーカースレッドで実行）"""
        try:
            translator = DeepGoogleTranslator(
                source=normalize_for_google(request.source_lang),
                target=normalize_for_google(request.target_lang),
            )
            result = translator.translate(request.text)
        except TooManyRequests as e:
            raise TranslationNetworkError(f"Rate limited: {e}") from e
        except RequestError as e:
            raise TranslationNetworkError(f"API request failed: {e}") from e
        except TranslationNotFound as e:
            raise TranslationBackendError(f"Translation not found: {e}") from e
        except Exception as e:
            raise TranslationBackendError(f"Unexpected error: {e}") from e

        if not isinstance(result, str):
            raise TranslationBackendError(f"Unexpected result type: {type(result).__name__}")
        return result

    def get_translator_name(self) -> str:
        """プロバイダ名を取得"""
        return "google"

    def get_supported_pairs(self) -> List[Tuple[str, str]]:
        """
        サポートする言語ペアを取得

        Returns:
            空リスト（全言語ペア対応を意味する）
        """
        return []
