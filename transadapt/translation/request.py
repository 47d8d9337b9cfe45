"""
翻訳リクエストのデータクラス

1 回の呼び出しごとに生成され、変更されない。
生成時にバリデーションを行い、不正な入力は RequestValidationError とする。
"""

from __future__ import annotations

from dataclasses import dataclass

from .exceptions import RequestValidationError
from .lang_codes import is_valid_tag, normalize_tag


@dataclass(frozen=True)
class TranslationRequest:
    """翻訳リクエスト"""

    text: str  # 翻訳対象テキスト（そのまま保持）
    source_lang: str  # ソース言語（小文字に正規化）
    target_lang: str  # ターゲット言語（小文字に正規化）

    def __post_init__(self) -> None:
        if not isinstance(self.text, str) or not self.text.strip():
            raise RequestValidationError("Text to translate must not be empty")

        for field_name in ("source_lang", "target_lang"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value.strip():
                raise RequestValidationError(f"{field_name} must not be empty")
            if not is_valid_tag(value):
                raise RequestValidationError(
                    f"{field_name} is not a valid language tag: {value!r}"
                )
            # frozen dataclass なので object.__setattr__ で正規化値を設定
            object.__setattr__(self, field_name, normalize_tag(value))

    @property
    def language_pair(self) -> tuple[str, str]:
        """(source_lang, target_lang)"""
        return (self.source_lang, self.target_lang)
