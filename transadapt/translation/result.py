"""
翻訳結果のデータクラス

プロバイダが生成し、呼び出し側へ渡った後は変更されない。
インクリメンタル配信では is_final=False の部分結果が続き、
最後の 1 件だけが is_final=True となる。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .request import TranslationRequest


@dataclass(frozen=True)
class TranslationResponse:
    """翻訳結果"""

    text: str  # 翻訳テキスト（部分結果の場合はプレフィックス）
    is_final: bool = True  # 最終結果かどうか
    original_text: Optional[str] = None  # 対応する原文（部分結果の場合はプレフィックス）
    source_lang: Optional[str] = None  # ソース言語
    target_lang: Optional[str] = None  # ターゲット言語

    @classmethod
    def final(
        cls,
        text: str,
        request: Optional[TranslationRequest] = None,
        original_text: Optional[str] = None,
    ) -> TranslationResponse:
        """最終結果を作成"""
        return cls._for_request(text, True, request, original_text)

    @classmethod
    def partial(
        cls,
        text: str,
        request: Optional[TranslationRequest] = None,
        original_text: Optional[str] = None,
    ) -> TranslationResponse:
        """部分結果を作成"""
        return cls._for_request(text, False, request, original_text)

    @classmethod
    def _for_request(
        cls,
        text: str,
        is_final: bool,
        request: Optional[TranslationRequest],
        original_text: Optional[str],
    ) -> TranslationResponse:
        if request is None:
            return cls(text=text, is_final=is_final, original_text=original_text)
        return cls(
            text=text,
            is_final=is_final,
            original_text=original_text if original_text is not None else request.text,
            source_lang=request.source_lang,
            target_lang=request.target_lang,
        )
