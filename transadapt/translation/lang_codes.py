"""
言語コード正規化ユーティリティ

BCP-47 言語タグの検証・正規化と各プロバイダ向けの変換を提供。
langcodes ライブラリを使用。
"""

import langcodes

# 対話モードの表示用
LANGUAGE_NAMES = {
    "en": "English",
    "uk": "Ukrainian",
    "de": "German",
    "ja": "Japanese",
    "fr": "French",
    "es": "Spanish",
    "zh": "Simplified Chinese",
    "zh-tw": "Traditional Chinese",
}


def is_valid_tag(tag: str) -> bool:
    """
    BCP-47 として妥当な言語タグかどうか

    Examples:
        >>> is_valid_tag("uk")
        True
        >>> is_valid_tag("EN-us")
        True
        >>> is_valid_tag("not a tag")
        False
    """
    if not tag or not tag.strip():
        return False
    return langcodes.tag_is_valid(tag.strip())


def normalize_tag(tag: str) -> str:
    """
    言語タグを比較用に正規化（前後の空白除去 + 小文字化）

    大文字小文字を区別しない比較のため、リクエストはこの形で保持する。

    Examples:
        >>> normalize_tag(" EN ")
        'en'
        >>> normalize_tag("zh-TW")
        'zh-tw'
    """
    return tag.strip().lower()


def to_iso639_1(code: str) -> str:
    """
    BCP-47 言語コードを ISO 639-1 に変換

    Examples:
        >>> to_iso639_1("ja")
        'ja'
        >>> to_iso639_1("zh-CN")
        'zh'
        >>> to_iso639_1("ZH-TW")  # 大文字も正規化
        'zh'
    """
    return langcodes.Language.get(code).language


def normalize_for_google(lang: str) -> str:
    """
    Google Translate 用に正規化

    Note: Google は zh-CN/zh-TW を区別するため、
          元の入力が zh-TW なら維持する

    Examples:
        >>> normalize_for_google("ja")
        'ja'
        >>> normalize_for_google("zh")
        'zh-CN'
        >>> normalize_for_google("zh-TW")
        'zh-TW'
    """
    if lang.lower() in ("zh-tw", "zh-hant"):
        return "zh-TW"
    iso = to_iso639_1(lang)
    if iso == "zh":
        return "zh-CN"
    return iso


def normalize_for_libretranslate(lang: str) -> str:
    """
    LibreTranslate 用に正規化

    LibreTranslate は ISO 639-1 を基本とし、繁体字中国語のみ "zt" を使う。
    """
    if lang.lower() in ("zh-tw", "zh-hant"):
        return "zt"
    return to_iso639_1(lang)


def get_language_name(lang: str) -> str:
    """
    表示用に言語名を取得

    Returns:
        英語での言語名（例: "Ukrainian", "English"）
    """
    key = normalize_tag(lang)
    if key in LANGUAGE_NAMES:
        return LANGUAGE_NAMES[key]
    iso = to_iso639_1(lang)
    if iso in LANGUAGE_NAMES:
        return LANGUAGE_NAMES[iso]
    # 未知の言語は langcodes から取得（language_data が必要）
    return langcodes.Language.get(lang).display_name()
