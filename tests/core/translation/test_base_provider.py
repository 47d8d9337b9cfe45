"""
TranslationProvider 基底クラスのテスト
"""

from __future__ import annotations

import asyncio
from typing import AsyncIterator, List, Optional, Tuple

import pytest

from transadapt.translation.base import TranslationProvider
from transadapt.translation.cancellation import CancellationToken
from transadapt.translation.exceptions import (
    ProviderClosedError,
    TranslationBackendError,
    TranslationCancelledError,
    UnsupportedLanguagePairError,
)
from transadapt.translation.request import TranslationRequest
from transadapt.translation.result import TranslationResponse


class BrokenStreamProvider(TranslationProvider):
    """不正なシーケンスを生成するプロバイダ"""

    def __init__(self, responses: List[TranslationResponse]):
        super().__init__()
        self._responses = responses

    async def _translate(self, request, cancel_token):
        return TranslationResponse(text="partial", is_final=False)

    async def _stream(
        self,
        request: TranslationRequest,
        cancel_token: Optional[CancellationToken],
    ) -> AsyncIterator[TranslationResponse]:
        for response in self._responses:
            yield response

    def get_translator_name(self) -> str:
        return "broken"

    def get_supported_pairs(self) -> List[Tuple[str, str]]:
        return [("en", "uk")]


async def _collect(stream) -> List[TranslationResponse]:
    return [response async for response in stream]


class TestProviderLifecycle:
    """close とその後の呼び出し"""

    def test_close_is_idempotent(self, make_provider, hello_request):
        async def run_test():
            provider = make_provider()
            await provider.close()
            await provider.close()
            return provider

        provider = asyncio.run(run_test())
        assert provider.closed is True
        assert provider.release_count == 1

    def test_translate_after_close_raises(self, make_provider, hello_request):
        async def run_test():
            provider = make_provider()
            await provider.close()
            await provider.translate(hello_request)

        with pytest.raises(ProviderClosedError):
            asyncio.run(run_test())

    def test_stream_after_close_raises(self, make_provider, hello_request):
        async def run_test():
            provider = make_provider()
            await provider.close()
            await _collect(provider.translate_incrementally(hello_request))

        with pytest.raises(ProviderClosedError):
            asyncio.run(run_test())

    def test_async_context_manager_closes(self, make_provider):
        async def run_test():
            async with make_provider() as provider:
                assert provider.closed is False
            return provider

        provider = asyncio.run(run_test())
        assert provider.closed is True
        assert provider.release_count == 1


class TestProviderChecks:
    """共通の前処理と結果検証"""

    def test_cancelled_token_fails_before_backend_call(self, make_provider, hello_request):
        async def run_test():
            provider = make_provider()
            token = CancellationToken()
            token.cancel()
            try:
                await provider.translate(hello_request, token)
            finally:
                assert provider.calls == 0

        with pytest.raises(TranslationCancelledError):
            asyncio.run(run_test())

    def test_unsupported_pair_rejected(self):
        provider = BrokenStreamProvider([])
        request = TranslationRequest("Hello", "en", "fr")
        with pytest.raises(UnsupportedLanguagePairError):
            asyncio.run(provider.translate(request))

    def test_partial_one_shot_response_rejected(self):
        """一括翻訳で部分結果を返すと恒久的エラー"""
        provider = BrokenStreamProvider([])
        request = TranslationRequest("Hello", "en", "uk")
        with pytest.raises(TranslationBackendError, match="partial"):
            asyncio.run(provider.translate(request))

    def test_response_after_final_rejected(self):
        """最終結果の後に結果が続くと恒久的エラー"""
        provider = BrokenStreamProvider(
            [TranslationResponse(text="a"), TranslationResponse(text="b")]
        )
        request = TranslationRequest("a b", "en", "uk")
        received: List[TranslationResponse] = []

        async def run_test():
            async for response in provider.translate_incrementally(request):
                received.append(response)

        with pytest.raises(TranslationBackendError, match="after the final"):
            asyncio.run(run_test())
        assert [r.text for r in received] == ["a"]

    def test_stream_without_final_rejected(self):
        """最終結果なしで終わると恒久的エラー"""
        provider = BrokenStreamProvider([TranslationResponse(text="a", is_final=False)])
        request = TranslationRequest("a b", "en", "uk")
        with pytest.raises(TranslationBackendError, match="without a final"):
            asyncio.run(_collect(provider.translate_incrementally(request)))


class TestDefaultStream:
    """ネイティブにストリーミングしないプロバイダ"""

    def test_single_final_response(self, make_provider, hello_request):
        """一括翻訳の結果 1 件のみ（ストリーミングを模倣しない）"""
        provider = make_provider(["Привіт світ"])
        responses = asyncio.run(_collect(provider.translate_incrementally(hello_request)))
        assert len(responses) == 1
        assert responses[0].text == "Привіт світ"
        assert responses[0].is_final is True

    def test_second_iteration_is_empty(self, make_provider, hello_request):
        """消費済みのシーケンスを再度反復しても何も生成しない"""

        async def run_test():
            provider = make_provider(["x"])
            stream = provider.translate_incrementally(hello_request)
            first = await _collect(stream)
            second = await _collect(stream)
            return first, second, provider.calls

        first, second, calls = asyncio.run(run_test())
        assert len(first) == 1
        assert second == []
        assert calls == 1
