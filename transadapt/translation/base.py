"""
翻訳プロバイダの抽象基底クラス

全てのバックエンド実装（モック、辞書、HTTP など）はこの基底クラスを継承し、
一括翻訳 _translate と、必要であればインクリメンタル翻訳 _stream を実装する。
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from contextlib import aclosing
from typing import AsyncIterator, List, Optional, Tuple

from .cancellation import CancellationToken, raise_if_cancelled
from .exceptions import (
    ProviderClosedError,
    TranslationBackendError,
    UnsupportedLanguagePairError,
)
from .request import TranslationRequest
from .result import TranslationResponse

logger = logging.getLogger(__name__)


class TranslationProvider(ABC):
    """
    翻訳プロバイダの抽象基底クラス

    公開メソッド translate / translate_incrementally は共通の前処理
    （解放済みチェック、キャンセルチェック、言語ペアチェック）と
    結果の検証を行い、実処理はサブクラスの _translate / _stream に委譲する。

    プロバイダは acquire → 0 回以上の呼び出し → close の順に使用する。
    close は冪等で、バックエンド資源の解放 (_release) は 1 度だけ行われる。
    close 後の呼び出しは ProviderClosedError となる。

    同一インスタンスへの並行呼び出しを許す場合、
    サブクラスのバックエンドアクセスが並行呼び出しに耐えること。
    """

    def __init__(self, **kwargs):
        """
        プロバイダを初期化

        Args:
            **kwargs: サブクラス固有のパラメータ
        """
        self._closed = False

    async def translate(
        self,
        request: TranslationRequest,
        cancel_token: Optional[CancellationToken] = None,
    ) -> TranslationResponse:
        """
        テキストを一括翻訳

        Args:
            request: 翻訳リクエスト
            cancel_token: キャンセルシグナル

        Returns:
            is_final=True の TranslationResponse

        Raises:
            ProviderClosedError: close 済みの場合
            TranslationCancelledError: 完了前にキャンセルされた場合
            TranslationNetworkError: 一時的なバックエンドエラー
            TranslationError: その他の翻訳エラー
        """
        self._check_call(request, cancel_token)
        response = await self._translate(request, cancel_token)
        if not response.is_final:
            raise TranslationBackendError(
                f"{self.get_translator_name()} returned a partial response "
                "from a one-shot translation"
            )
        return response

    async def translate_incrementally(
        self,
        request: TranslationRequest,
        cancel_token: Optional[CancellationToken] = None,
    ) -> AsyncIterator[TranslationResponse]:
        """
        テキストをインクリメンタルに翻訳

        増加するプレフィックスの部分結果を順に生成し、最後の 1 件だけが
        is_final=True となる。戻り値は一度きりの非同期ジェネレータで、
        消費し終えた（または aclose した）後に再度反復しても何も生成しない。

        消費側が途中で反復をやめて aclose() した場合、または cancel_token が
        キャンセルされた場合は、それ以降の結果は生成されず、このシーケンスに
        紐づく資源は解放される。

        Args:
            request: 翻訳リクエスト
            cancel_token: キャンセルシグナル

        Yields:
            TranslationResponse

        Raises:
            ProviderClosedError: close 済みの場合（最初の取得時）
            TranslationCancelledError: 途中でキャンセルされた場合
            TranslationBackendError: 最終結果の後に結果が続いた、
                または最終結果なしで終了した場合
        """
        self._check_call(request, cancel_token)
        final_seen = False
        async with aclosing(self._stream(request, cancel_token)) as stream:
            async for response in stream:
                if final_seen:
                    raise TranslationBackendError(
                        f"{self.get_translator_name()} emitted a response "
                        "after the final response"
                    )
                # キャンセル後は 1 件も渡さない
                raise_if_cancelled(cancel_token)
                final_seen = response.is_final
                yield response

        if not final_seen:
            raise TranslationBackendError(
                f"{self.get_translator_name()} ended the stream without a final response"
            )

    @abstractmethod
    async def _translate(
        self,
        request: TranslationRequest,
        cancel_token: Optional[CancellationToken],
    ) -> TranslationResponse:
        """バックエンドで一括翻訳（サブクラスで実装）"""
        ...

    async def _stream(
        self,
        request: TranslationRequest,
        cancel_token: Optional[CancellationToken],
    ) -> AsyncIterator[TranslationResponse]:
        """
        インクリメンタル翻訳（デフォルト実装）

        ネイティブにストリーミングできないバックエンドでは
        ストリーミングを模倣せず、一括翻訳の結果 1 件だけを生成する。
        """
        yield await self._translate(request, cancel_token)

    @abstractmethod
    def get_supported_pairs(self) -> List[Tuple[str, str]]:
        """
        サポートする言語ペアを取得

        Returns:
            言語ペアのリスト。空リストは全ペア対応を意味する。
        """
        ...

    @abstractmethod
    def get_translator_name(self) -> str:
        """
        プロバイダ名を取得

        Returns:
            プロバイダの識別子（例: "mock", "libretranslate"）
        """
        ...

    @property
    def closed(self) -> bool:
        """close 済みなら True"""
        return self._closed

    async def close(self) -> None:
        """
        プロバイダを解放

        2 回目以降の呼び出しは何もしない。
        """
        if self._closed:
            return
        self._closed = True
        logger.debug("Releasing translation provider %s", self.get_translator_name())
        await self._release()

    async def _release(self) -> None:
        """
        バックエンド資源の解放

        HTTP クライアントのクローズなどを行う。
        サブクラスでオーバーライドして具体的な処理を実装する。
        """
        pass

    async def __aenter__(self) -> "TranslationProvider":
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()

    def _check_call(
        self,
        request: TranslationRequest,
        cancel_token: Optional[CancellationToken],
    ) -> None:
        if self._closed:
            raise ProviderClosedError(self.get_translator_name())
        raise_if_cancelled(cancel_token)
        pairs = self.get_supported_pairs()
        if pairs and request.language_pair not in pairs:
            raise UnsupportedLanguagePairError(
                request.source_lang, request.target_lang, self.get_translator_name()
            )
