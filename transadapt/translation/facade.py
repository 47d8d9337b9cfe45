"""
高レベル翻訳 API

呼び出し側を具体的なプロバイダ／ラッパーの組み合わせから切り離すための薄い窓口。
"""

from __future__ import annotations

from typing import AsyncIterator, Optional

from .adapter import ResilientTranslator
from .cancellation import CancellationToken
from .request import TranslationRequest
from .result import TranslationResponse


class Translator:
    """
    翻訳の窓口

    ResilientTranslator を 1 つ排他的に所有し、close() 時に解放する。
    追加のロジックは持たない。

    Usage:
        async with TranslatorFactory.create_translator("mock") as translator:
            response = await translator.translate(
                TranslationRequest("Hello world", "en", "uk")
            )
            print(response.text)  # "[uk] Hello world"
    """

    def __init__(self, adapter: ResilientTranslator):
        self._adapter = adapter

    @property
    def adapter(self) -> ResilientTranslator:
        return self._adapter

    async def translate(
        self,
        request: TranslationRequest,
        cancel_token: Optional[CancellationToken] = None,
    ) -> TranslationResponse:
        return await self._adapter.translate(request, cancel_token)

    def translate_incrementally(
        self,
        request: TranslationRequest,
        cancel_token: Optional[CancellationToken] = None,
    ) -> AsyncIterator[TranslationResponse]:
        return self._adapter.translate_incrementally(request, cancel_token)

    async def close(self) -> None:
        await self._adapter.close()

    async def __aenter__(self) -> "Translator":
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()
