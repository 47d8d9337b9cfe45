"""
モックプロバイダ実装

ネットワークを使わずに "[{target}] {text}" 形式の結果を返す。
テストやプロバイダ差し替えの確認に使用。
"""

from __future__ import annotations

import logging
from typing import AsyncIterator, List, Optional, Tuple

from ..base import TranslationProvider
from ..cancellation import CancellationToken, sleep
from ..request import TranslationRequest
from ..result import TranslationResponse
from ..segmenter import iter_token_prefixes, token_spans

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_DELAY = 0.05


class MockProvider(TranslationProvider):
    """
    モック翻訳プロバイダ

    インクリメンタル翻訳では空白区切りトークンごとに増加するプレフィックスを
    返し、結果の間に chunk_delay 秒待機する（バックエンドの遅延を模倣）。

    Examples:
        >>> provider = MockProvider(chunk_delay=0)
        >>> response = await provider.translate(TranslationRequest("Hello world", "en", "uk"))
        >>> response.text
        '[uk] Hello world'
    """

    def __init__(
        self,
        chunk_delay: float = DEFAULT_CHUNK_DELAY,
        response_delay: float = 0.0,
        **kwargs,
    ):
        """
        MockProvider を初期化

        Args:
            chunk_delay: インクリメンタル翻訳の結果間の待機時間（秒）
            response_delay: 一括翻訳の応答待機時間（秒）
            **kwargs: TranslationProvider に渡すパラメータ
        """
        super().__init__(**kwargs)
        self.chunk_delay = chunk_delay
        self.response_delay = response_delay
        self.release_count = 0  # _release が呼ばれた回数
        self.active_streams = 0  # 生成中のシーケンス数

    async def _translate(
        self,
        request: TranslationRequest,
        cancel_token: Optional[CancellationToken],
    ) -> TranslationResponse:
        if self.response_delay > 0:
            await sleep(self.response_delay, cancel_token)
        spans = token_spans(request.text)
        source = request.text[spans[0][0] : spans[-1][1]]
        return TranslationResponse.final(self._render(source, request), request)

    async def _stream(
        self,
        request: TranslationRequest,
        cancel_token: Optional[CancellationToken],
    ) -> AsyncIterator[TranslationResponse]:
        prefixes = list(iter_token_prefixes(request.text))
        self.active_streams += 1
        try:
            for index, prefix in enumerate(prefixes, start=1):
                if index > 1:
                    await sleep(self.chunk_delay, cancel_token)
                text = self._render(prefix, request)
                if index == len(prefixes):
                    yield TranslationResponse.final(text, request, original_text=prefix)
                else:
                    yield TranslationResponse.partial(text, request, original_text=prefix)
        finally:
            self.active_streams -= 1
            logger.debug("Mock stream released after %d tokens", len(prefixes))

    @staticmethod
    def _render(text: str, request: TranslationRequest) -> str:
        return f"[{request.target_lang}] {text}"

    async def _release(self) -> None:
        self.release_count += 1

    def get_translator_name(self) -> str:
        """プロバイダ名を取得"""
        return "mock"

    def get_supported_pairs(self) -> List[Tuple[str, str]]:
        """空リスト（全言語ペア対応を意味する）"""
        return []
