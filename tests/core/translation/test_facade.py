"""
Translator（高レベル API）のテスト
"""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

from transadapt.translation.adapter import ResilientTranslator
from transadapt.translation.facade import Translator
from transadapt.translation.impl.mock import MockProvider
from transadapt.translation.request import TranslationRequest


async def _collect(stream):
    return [response async for response in stream]


class TestTranslator:
    """Translator のテスト"""

    def test_translate_delegates(self, hello_request):
        adapter = MagicMock(spec=ResilientTranslator)
        adapter.translate = AsyncMock(return_value="response")
        translator = Translator(adapter)
        token = object()

        assert asyncio.run(translator.translate(hello_request, token)) == "response"
        adapter.translate.assert_awaited_once_with(hello_request, token)

    def test_translate_incrementally_delegates(self, hello_request):
        adapter = MagicMock(spec=ResilientTranslator)
        adapter.translate_incrementally.return_value = "stream"
        translator = Translator(adapter)

        assert translator.translate_incrementally(hello_request) == "stream"
        adapter.translate_incrementally.assert_called_once_with(hello_request, None)

    def test_end_to_end_with_mock_provider(self):
        """Translator → ResilientTranslator → MockProvider"""
        provider = MockProvider(chunk_delay=0)
        request = TranslationRequest("Hello world", "en", "uk")

        async def run_test():
            async with Translator(ResilientTranslator(provider)) as translator:
                final = await translator.translate(request)
                partials = await _collect(translator.translate_incrementally(request))
            return final, partials

        final, partials = asyncio.run(run_test())
        assert final.text == "[uk] Hello world"
        assert [(r.text, r.is_final) for r in partials] == [
            ("[uk] Hello", False),
            ("[uk] Hello world", True),
        ]
        assert provider.release_count == 1

    def test_close_twice(self):
        provider = MockProvider()
        translator = Translator(ResilientTranslator(provider))

        async def run_test():
            await translator.close()
            await translator.close()

        asyncio.run(run_test())
        assert provider.release_count == 1
