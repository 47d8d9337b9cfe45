"""
辞書プロバイダ実装

メモリ上の対訳辞書を引く簡易バックエンド。
フレーズ全体で見つからない場合は単語ごとに引き、
見つからない単語は "[No translation found for '...']" に置き換える。
"""

from __future__ import annotations

import logging
from typing import AsyncIterator, Dict, List, Mapping, Optional, Tuple

from ..base import TranslationProvider
from ..cancellation import CancellationToken, sleep
from ..request import TranslationRequest
from ..result import TranslationResponse
from ..segmenter import token_spans

logger = logging.getLogger(__name__)

# (原文, ソース言語, ターゲット言語) -> 訳文
DEFAULT_ENTRIES: Dict[Tuple[str, str, str], str] = {
    # en -> uk
    ("hello", "en", "uk"): "Привіт",
    ("world", "en", "uk"): "Світ",
    ("adapter", "en", "uk"): "Адаптер",
    # uk -> en
    ("привіт", "uk", "en"): "Hello",
    ("світ", "uk", "en"): "World",
    ("адаптер", "uk", "en"): "Adapter",
    # uk -> de
    ("світ", "uk", "de"): "Welt",
    ("привіт", "uk", "de"): "Hallo",
    # de -> uk
    ("welt", "de", "uk"): "Світ",
    ("hallo", "de", "uk"): "Привіт",
}


def not_found_marker(text: str) -> str:
    return f"[No translation found for '{text}']"


class DictionaryProvider(TranslationProvider):
    """
    辞書ベースの翻訳プロバイダ

    キーは大文字小文字を区別しない。インクリメンタル翻訳では
    単語ごとに訳し、訳文のプレフィックスを順に返す。

    Examples:
        >>> provider = DictionaryProvider()
        >>> (await provider.translate(TranslationRequest("Hello", "en", "uk"))).text
        'Привіт'
    """

    def __init__(
        self,
        entries: Optional[Mapping[Tuple[str, str, str], str]] = None,
        chunk_delay: float = 0.0,
        **kwargs,
    ):
        """
        DictionaryProvider を初期化

        Args:
            entries: 対訳辞書。省略時は DEFAULT_ENTRIES
            chunk_delay: インクリメンタル翻訳の結果間の待機時間（秒）
            **kwargs: TranslationProvider に渡すパラメータ
        """
        super().__init__(**kwargs)
        self.chunk_delay = chunk_delay
        self._entries: Dict[str, str] = {}
        if entries is None:
            entries = DEFAULT_ENTRIES
        for (text, source, target), translation in entries.items():
            self.add_entry(text, source, target, translation)

    def add_entry(self, text: str, source_lang: str, target_lang: str, translation: str) -> None:
        """対訳を追加（既存のキーは上書き）"""
        self._entries[self._key(text, source_lang, target_lang)] = translation

    def lookup(self, text: str, source_lang: str, target_lang: str) -> Optional[str]:
        """対訳を検索。見つからなければ None"""
        return self._entries.get(self._key(text, source_lang, target_lang))

    async def _translate(
        self,
        request: TranslationRequest,
        cancel_token: Optional[CancellationToken],
    ) -> TranslationResponse:
        phrase = self.lookup(request.text, request.source_lang, request.target_lang)
        if phrase is not None:
            return TranslationResponse.final(phrase, request)

        pieces = self._translate_words(request)
        return TranslationResponse.final(pieces[-1], request)

    async def _stream(
        self,
        request: TranslationRequest,
        cancel_token: Optional[CancellationToken],
    ) -> AsyncIterator[TranslationResponse]:
        # フレーズ登録があれば単語単位に分割しない（一括翻訳と同じ結果）
        phrase = self.lookup(request.text, request.source_lang, request.target_lang)
        if phrase is not None:
            yield TranslationResponse.final(phrase, request)
            return

        prefixes = self._translate_words(request)
        spans = token_spans(request.text)
        start = spans[0][0]
        for index, (prefix, (_, end)) in enumerate(zip(prefixes, spans), start=1):
            if index > 1:
                await sleep(self.chunk_delay, cancel_token)
            original = request.text[start:end]
            if index == len(prefixes):
                yield TranslationResponse.final(prefix, request, original_text=original)
            else:
                yield TranslationResponse.partial(prefix, request, original_text=original)

    def _translate_words(self, request: TranslationRequest) -> List[str]:
        """単語ごとに訳し、先頭 i 単語分の訳文プレフィックスのリストを返す"""
        text = request.text
        spans = token_spans(text)
        prefixes: List[str] = []
        current = ""
        previous_end = None
        for start, end in spans:
            word = text[start:end]
            translated = self.lookup(word, request.source_lang, request.target_lang)
            if translated is None:
                logger.debug(
                    "No dictionary entry for %r (%s -> %s)",
                    word,
                    request.source_lang,
                    request.target_lang,
                )
                translated = not_found_marker(word)
            # 元の区切り文字を保持
            separator = "" if previous_end is None else text[previous_end:start]
            current = f"{current}{separator}{translated}"
            prefixes.append(current)
            previous_end = end
        return prefixes

    @staticmethod
    def _key(text: str, source_lang: str, target_lang: str) -> str:
        return f"{text.strip().lower()}|{source_lang.strip().lower()}|{target_lang.strip().lower()}"

    def get_translator_name(self) -> str:
        """プロバイダ名を取得"""
        return "dictionary"

    def get_supported_pairs(self) -> List[Tuple[str, str]]:
        """辞書に登録されている言語ペア"""
        pairs = []
        for key in self._entries:
            _, source, target = key.rsplit("|", 2)
            if (source, target) not in pairs:
                pairs.append((source, target))
        return pairs
