"""
プロバイダのレジリエンスラッパー

一括翻訳には指数バックオフ付きリトライを加え、
インクリメンタル翻訳はリトライせずにそのまま中継する。
"""

from __future__ import annotations

import logging
from contextlib import aclosing
from typing import AsyncIterator, Optional

from .base import TranslationProvider
from .cancellation import CancellationToken
from .exceptions import ProviderClosedError
from .request import TranslationRequest
from .result import TranslationResponse
from .retry import RetryPolicy, retry_async

logger = logging.getLogger(__name__)


class ResilientTranslator:
    """
    プロバイダをラップしてリトライとキャンセル伝播を加える

    ラップしたプロバイダはこのインスタンスが排他的に所有し、
    close() 時に 1 度だけ解放する。2 回目以降の close() は何もしない。

    呼び出しをまたぐ可変状態は close 済みフラグのみで、リトライ回数などは
    呼び出しごとのローカル変数なので、プロバイダが並行呼び出しに耐える限り
    同一インスタンスへの並行呼び出しは安全。

    Args:
        provider: ラップするプロバイダ
        retry_policy: リトライ設定（デフォルト: 3 回, 0.2 秒から倍々）

    Usage:
        adapter = ResilientTranslator(MockProvider())
        response = await adapter.translate(TranslationRequest("Hello", "en", "uk"))

        async with aclosing(adapter.translate_incrementally(request)) as stream:
            async for partial in stream:
                print(partial.text)
    """

    def __init__(
        self,
        provider: TranslationProvider,
        retry_policy: Optional[RetryPolicy] = None,
    ):
        self._provider = provider
        self._retry_policy = retry_policy or RetryPolicy()
        self._closed = False

    @property
    def provider(self) -> TranslationProvider:
        return self._provider

    @property
    def retry_policy(self) -> RetryPolicy:
        return self._retry_policy

    @property
    def closed(self) -> bool:
        return self._closed

    async def translate(
        self,
        request: TranslationRequest,
        cancel_token: Optional[CancellationToken] = None,
    ) -> TranslationResponse:
        """
        一時的エラーをリトライしながら一括翻訳

        一時的エラー以外（恒久的エラー、キャンセル、バリデーション）は
        リトライせずにそのまま送出する。
        """
        self._ensure_open()
        return await retry_async(
            lambda: self._provider.translate(request, cancel_token),
            self._retry_policy,
            cancel_token,
            description=f"Translation via {self._provider.get_translator_name()}",
        )

    async def translate_incrementally(
        self,
        request: TranslationRequest,
        cancel_token: Optional[CancellationToken] = None,
    ) -> AsyncIterator[TranslationResponse]:
        """
        プロバイダのインクリメンタル翻訳をそのまま中継

        一部を配信済みのストリームは重複や順序の入れ替えなしに再実行できないため、
        リトライは行わない。途中のエラーはその時点でシーケンスを終了させて送出する。
        消費側の aclose() やキャンセルはプロバイダのジェネレータへ伝播する。
        """
        self._ensure_open()
        async with aclosing(
            self._provider.translate_incrementally(request, cancel_token)
        ) as stream:
            async for response in stream:
                yield response

    async def close(self) -> None:
        """ラップしたプロバイダを解放（冪等）"""
        if self._closed:
            return
        self._closed = True
        await self._provider.close()

    async def __aenter__(self) -> "ResilientTranslator":
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()

    def _ensure_open(self) -> None:
        if self._closed:
            raise ProviderClosedError(self._provider.get_translator_name())
