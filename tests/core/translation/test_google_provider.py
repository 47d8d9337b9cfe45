"""
GoogleProvider のテスト

deep-translator はネットワークを使うためモックに差し替える。
"""

from __future__ import annotations

import asyncio
from unittest.mock import MagicMock, patch

import pytest
from deep_translator.exceptions import (
    RequestError,
    TooManyRequests,
    TranslationNotFound,
)

from transadapt.translation.exceptions import (
    TranslationBackendError,
    TranslationNetworkError,
    UnsupportedLanguagePairError,
)
from transadapt.translation.impl.google import GoogleProvider
from transadapt.translation.request import TranslationRequest

DEEP_TRANSLATOR = "transadapt.translation.impl.google.DeepGoogleTranslator"


def _request(source: str = "en", target: str = "uk") -> TranslationRequest:
    return TranslationRequest("Hello world", source, target)


class TestGoogleProviderBasic:
    """GoogleProvider の基本テスト"""

    def test_name_and_pairs(self):
        provider = GoogleProvider()
        assert provider.get_translator_name() == "google"
        assert provider.get_supported_pairs() == []

    def test_translate(self):
        with patch(DEEP_TRANSLATOR) as mock_class:
            mock_class.return_value.translate.return_value = "Привіт світ"
            response = asyncio.run(GoogleProvider().translate(_request()))

        assert response.text == "Привіт світ"
        assert response.is_final is True
        assert response.original_text == "Hello world"
        mock_class.assert_called_once_with(source="en", target="uk")
        mock_class.return_value.translate.assert_called_once_with("Hello world")

    def test_chinese_variants_are_mapped(self):
        with patch(DEEP_TRANSLATOR) as mock_class:
            mock_class.return_value.translate.return_value = "你好"
            asyncio.run(GoogleProvider().translate(_request("en", "zh-TW")))

        mock_class.assert_called_once_with(source="en", target="zh-TW")

    def test_same_language_rejected(self):
        with patch(DEEP_TRANSLATOR) as mock_class:
            with pytest.raises(UnsupportedLanguagePairError):
                asyncio.run(GoogleProvider().translate(_request("en", "en-US")))
        mock_class.assert_not_called()

    def test_incremental_yields_single_final(self):
        with patch(DEEP_TRANSLATOR) as mock_class:
            mock_class.return_value.translate.return_value = "Привіт світ"
            provider = GoogleProvider()

            async def run_test():
                return [r async for r in provider.translate_incrementally(_request())]

            responses = asyncio.run(run_test())

        assert [(r.text, r.is_final) for r in responses] == [("Привіт світ", True)]


class TestGoogleProviderErrors:
    """deep-translator の例外の分類"""

    @pytest.mark.parametrize(
        "error, expected, message",
        [
            (TooManyRequests(), TranslationNetworkError, "Rate limited"),
            (RequestError(), TranslationNetworkError, "API request failed"),
            (TranslationNotFound("Hello world"), TranslationBackendError, "not found"),
            (RuntimeError("boom"), TranslationBackendError, "Unexpected error"),
        ],
    )
    def test_error_mapping(self, error, expected, message):
        with patch(DEEP_TRANSLATOR) as mock_class:
            mock_class.return_value.translate.side_effect = error
            with pytest.raises(expected, match=message):
                asyncio.run(GoogleProvider().translate(_request()))

    def test_rate_limit_is_transient_not_backend(self):
        with patch(DEEP_TRANSLATOR) as mock_class:
            mock_class.return_value.translate.side_effect = TooManyRequests()
            with pytest.raises(TranslationNetworkError) as exc_info:
                asyncio.run(GoogleProvider().translate(_request()))
        assert not isinstance(exc_info.value, TranslationBackendError)

    def test_non_string_result(self):
        with patch(DEEP_TRANSLATOR) as mock_class:
            mock_class.return_value.translate.return_value = MagicMock()
            with pytest.raises(TranslationBackendError, match="Unexpected result type"):
                asyncio.run(GoogleProvider().translate(_request()))
