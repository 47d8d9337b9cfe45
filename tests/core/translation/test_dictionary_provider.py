"""
DictionaryProvider のテスト
"""

from __future__ import annotations

import asyncio

import pytest

from transadapt.translation.exceptions import UnsupportedLanguagePairError
from transadapt.translation.impl.dictionary import DictionaryProvider, not_found_marker
from transadapt.translation.request import TranslationRequest


async def _collect(stream):
    return [response async for response in stream]


class TestDictionaryProviderBasic:
    """DictionaryProvider の基本テスト"""

    def test_name(self):
        assert DictionaryProvider().get_translator_name() == "dictionary"

    def test_supported_pairs_from_entries(self):
        pairs = DictionaryProvider().get_supported_pairs()
        assert ("en", "uk") in pairs
        assert ("uk", "de") in pairs
        assert ("en", "fr") not in pairs

    @pytest.mark.parametrize(
        "text, source, target, expected",
        [
            ("Hello", "en", "uk", "Привіт"),
            ("HELLO", "EN", "UK", "Привіт"),
            ("привіт", "uk", "en", "Hello"),
            ("Світ", "uk", "de", "Welt"),
            ("Welt", "de", "uk", "Світ"),
        ],
    )
    def test_phrase_lookup(self, text, source, target, expected):
        """大文字小文字を区別せずに引く"""
        provider = DictionaryProvider()
        response = asyncio.run(provider.translate(TranslationRequest(text, source, target)))
        assert response.text == expected
        assert response.is_final is True

    def test_word_by_word_fallback(self):
        """フレーズで見つからなければ単語ごとに引く"""
        provider = DictionaryProvider()
        response = asyncio.run(
            provider.translate(TranslationRequest("Hello world", "en", "uk"))
        )
        assert response.text == "Привіт Світ"

    def test_unknown_word_marker(self):
        provider = DictionaryProvider()
        response = asyncio.run(
            provider.translate(TranslationRequest("Hello there", "en", "uk"))
        )
        assert response.text == f"Привіт {not_found_marker('there')}"

    def test_unsupported_pair(self):
        provider = DictionaryProvider()
        with pytest.raises(UnsupportedLanguagePairError):
            asyncio.run(provider.translate(TranslationRequest("Hello", "en", "fr")))

    def test_custom_entries(self):
        provider = DictionaryProvider(entries={("cat", "en", "de"): "Katze"})
        response = asyncio.run(provider.translate(TranslationRequest("Cat", "en", "de")))
        assert response.text == "Katze"
        assert provider.get_supported_pairs() == [("en", "de")]

    def test_add_entry_overrides(self):
        provider = DictionaryProvider()
        provider.add_entry("Hello", "en", "uk", "Вітаю")
        assert provider.lookup("hello", "EN", "uk") == "Вітаю"


class TestDictionaryProviderStreaming:
    """インクリメンタル翻訳のテスト"""

    def test_growing_translated_prefixes(self):
        provider = DictionaryProvider()
        request = TranslationRequest("Hello  world adapter", "en", "uk")
        responses = asyncio.run(_collect(provider.translate_incrementally(request)))
        assert [(r.text, r.is_final) for r in responses] == [
            ("Привіт", False),
            ("Привіт  Світ", False),
            ("Привіт  Світ Адаптер", True),
        ]
        assert [r.original_text for r in responses] == [
            "Hello",
            "Hello  world",
            "Hello  world adapter",
        ]

    def test_final_matches_one_shot(self):
        provider = DictionaryProvider()
        request = TranslationRequest("Hello world", "en", "uk")
        responses = asyncio.run(_collect(provider.translate_incrementally(request)))
        one_shot = asyncio.run(provider.translate(request))
        assert responses[-1].text == one_shot.text

    def test_phrase_entry_streams_phrase_translation(self):
        """複数語のフレーズ登録は一括翻訳と同じ最終結果になる"""
        provider = DictionaryProvider()
        provider.add_entry("good morning", "en", "uk", "Доброго ранку")
        request = TranslationRequest("Good morning", "en", "uk")

        responses = asyncio.run(_collect(provider.translate_incrementally(request)))
        one_shot = asyncio.run(provider.translate(request))

        assert one_shot.text == "Доброго ранку"
        assert [(r.text, r.is_final) for r in responses] == [("Доброго ранку", True)]
        assert responses[-1].original_text == "Good morning"
