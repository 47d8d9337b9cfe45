"""
LibreTranslate 実装

httpx の非同期クライアントで LibreTranslate 互換の HTTP API を呼び出す。
リクエストは JSON {"q", "source", "target", "format"}、
応答の "translatedText" を訳文として使用する。
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional, Tuple

import httpx

from ..base import TranslationProvider
from ..cancellation import CancellationToken, guard
from ..exceptions import (
    TranslationAuthError,
    TranslationBackendError,
    TranslationNetworkError,
    TranslationTimeoutError,
    UnsupportedLanguagePairError,
)
from ..lang_codes import normalize_for_libretranslate
from ..request import TranslationRequest
from ..result import TranslationResponse

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "http://localhost:5000/translate"

# HTTP タイムアウト（秒）
# 環境変数 TRANSADAPT_HTTP_TIMEOUT で上書き可能
_DEFAULT_HTTP_TIMEOUT = 10.0


def _get_http_timeout() -> float:
    """環境変数から HTTP タイムアウトを取得（安全なパース）"""
    env_value = os.environ.get("TRANSADAPT_HTTP_TIMEOUT")
    if env_value is None:
        return _DEFAULT_HTTP_TIMEOUT

    try:
        timeout = float(env_value)
    except ValueError:
        logger.warning(
            "Invalid TRANSADAPT_HTTP_TIMEOUT value '%s', using default %.1fs",
            env_value,
            _DEFAULT_HTTP_TIMEOUT,
        )
        return _DEFAULT_HTTP_TIMEOUT

    if timeout <= 0:
        logger.warning(
            "TRANSADAPT_HTTP_TIMEOUT must be positive (got %.1f), using default %.1fs",
            timeout,
            _DEFAULT_HTTP_TIMEOUT,
        )
        return _DEFAULT_HTTP_TIMEOUT

    return timeout


class LibreTranslateProvider(TranslationProvider):
    """
    LibreTranslate (HTTP)

    失敗は次のように分類する:
      - タイムアウト、接続エラー、HTTP 429 / 5xx: TranslationNetworkError（一時的）
      - HTTP 401 / 403: TranslationAuthError（恒久的）
      - HTTP 400 で言語ペア非対応: UnsupportedLanguagePairError
      - その他の 4xx、JSON でない応答、translatedText 欠落: TranslationBackendError

    HTTP クライアントは最初の呼び出し時に作成し、close() で閉じる。
    ストリーミング API は持たないため、インクリメンタル翻訳は最終結果 1 件のみ。

    Examples:
        >>> provider = LibreTranslateProvider(endpoint="https://libretranslate.com/translate")
        >>> response = await provider.translate(TranslationRequest("Hello", "en", "uk"))
    """

    def __init__(
        self,
        endpoint: str = DEFAULT_ENDPOINT,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
        **kwargs,
    ):
        """
        LibreTranslateProvider を初期化

        Args:
            endpoint: 翻訳 API の URL
            api_key: API キー（不要なサーバーでは None）
            timeout: HTTP タイムアウト（秒）。省略時は TRANSADAPT_HTTP_TIMEOUT または 10 秒
            client: 使用する httpx.AsyncClient（テスト用に注入可能。所有権はプロバイダに移る）
            **kwargs: TranslationProvider に渡すパラメータ
        """
        super().__init__(**kwargs)
        self.endpoint = endpoint
        self.api_key = api_key
        self.timeout = timeout if timeout is not None else _get_http_timeout()
        self._client = client

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    def _build_payload(self, request: TranslationRequest) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "q": request.text,
            "source": normalize_for_libretranslate(request.source_lang),
            "target": normalize_for_libretranslate(request.target_lang),
            "format": "text",
        }
        if self.api_key:
            payload["api_key"] = self.api_key
        return payload

    async def _translate(
        self,
        request: TranslationRequest,
        cancel_token: Optional[CancellationToken],
    ) -> TranslationResponse:
        client = self._get_client()
        try:
            response = await guard(
                client.post(self.endpoint, json=self._build_payload(request)),
                cancel_token,
            )
        except httpx.TimeoutException as e:
            raise TranslationTimeoutError(f"Request timed out: {e}") from e
        except httpx.TransportError as e:
            raise TranslationNetworkError(f"API request failed: {e}") from e

        self._raise_for_status(response, request)

        try:
            data = response.json()
        except ValueError as e:
            raise TranslationBackendError(f"Malformed response (not JSON): {e}") from e

        translated = data.get("translatedText") if isinstance(data, dict) else None
        if not isinstance(translated, str):
            raise TranslationBackendError(
                "Malformed response: 'translatedText' is missing"
            )

        return TranslationResponse.final(translated, request)

    def _raise_for_status(self, response: httpx.Response, request: TranslationRequest) -> None:
        status = response.status_code
        if status < 400:
            return

        detail = self._error_detail(response)
        if status == 429:
            raise TranslationNetworkError(f"Rate limited: {detail}")
        if status >= 500:
            raise TranslationNetworkError(f"Server error {status}: {detail}")
        if status in (401, 403):
            raise TranslationAuthError(f"Authentication failed ({status}): {detail}")
        if status == 400 and "not supported" in detail.lower():
            raise UnsupportedLanguagePairError(
                request.source_lang, request.target_lang, self.get_translator_name()
            )
        raise TranslationBackendError(f"Request rejected ({status}): {detail}")

    @staticmethod
    def _error_detail(response: httpx.Response) -> str:
        try:
            data = response.json()
        except ValueError:
            return response.text
        if isinstance(data, dict) and "error" in data:
            return str(data["error"])
        return response.text

    async def _release(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def get_translator_name(self) -> str:
        """プロバイダ名を取得"""
        return "libretranslate"

    def get_supported_pairs(self) -> List[Tuple[str, str]]:
        """空リスト（サーバー側で判定する）"""
        return []
