"""
翻訳例外クラスのテスト
"""

from __future__ import annotations

import asyncio

import pytest

from transadapt.translation.exceptions import (
    ProviderClosedError,
    RequestValidationError,
    TranslationAuthError,
    TranslationBackendError,
    TranslationCancelledError,
    TranslationError,
    TranslationNetworkError,
    TranslationTimeoutError,
    UnsupportedLanguagePairError,
    is_transient,
)


class TestExceptionHierarchy:
    """例外クラス階層のテスト"""

    @pytest.mark.parametrize(
        "error_class",
        [
            RequestValidationError,
            TranslationNetworkError,
            TranslationBackendError,
            UnsupportedLanguagePairError,
            ProviderClosedError,
            TranslationCancelledError,
        ],
    )
    def test_is_translation_error(self, error_class):
        """全て TranslationError のサブクラス"""
        assert issubclass(error_class, TranslationError)

    def test_timeout_is_network_error(self):
        """タイムアウトは一時的エラー"""
        assert issubclass(TranslationTimeoutError, TranslationNetworkError)

    def test_auth_is_backend_error(self):
        """認証エラーは恒久的エラー"""
        assert issubclass(TranslationAuthError, TranslationBackendError)

    def test_cancelled_is_neither_transient_nor_permanent(self):
        """キャンセルは一時的・恒久的エラーと区別される"""
        assert not issubclass(TranslationCancelledError, TranslationNetworkError)
        assert not issubclass(TranslationCancelledError, TranslationBackendError)

    def test_cancelled_is_not_asyncio_cancelled(self):
        """asyncio.CancelledError とも別物"""
        assert not issubclass(TranslationCancelledError, asyncio.CancelledError)


class TestIsTransient:
    """is_transient のテスト"""

    def test_network_errors_are_transient(self):
        assert is_transient(TranslationNetworkError("down"))
        assert is_transient(TranslationTimeoutError("slow"))

    @pytest.mark.parametrize(
        "error",
        [
            TranslationBackendError("bad reply"),
            TranslationAuthError("bad key"),
            RequestValidationError("empty"),
            TranslationCancelledError(),
            ProviderClosedError("mock"),
            RuntimeError("boom"),
        ],
    )
    def test_other_errors_are_not_transient(self, error):
        assert not is_transient(error)


class TestErrorMessages:
    """エラーメッセージと属性"""

    def test_unsupported_language_pair(self):
        error = UnsupportedLanguagePairError("en", "fr", "dictionary")
        assert "en -> fr" in str(error)
        assert error.source == "en"
        assert error.target == "fr"
        assert error.translator == "dictionary"

    def test_provider_closed(self):
        error = ProviderClosedError("mock")
        assert "mock" in str(error)
        assert error.translator == "mock"

    def test_cancelled_default_message(self):
        assert "cancelled" in str(TranslationCancelledError())
