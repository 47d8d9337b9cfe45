"""
翻訳プロバイダ実装

各プロバイダの実装を格納するサブパッケージ。

- mock.py: オフラインのモック（テスト、動作確認用）
- dictionary.py: メモリ上の対訳辞書
- libretranslate.py: LibreTranslate 互換 HTTP API (httpx)
- google.py: Google Translate (deep-translator)
"""

from __future__ import annotations

from .dictionary import DictionaryProvider
from .google import GoogleProvider
from .libretranslate import LibreTranslateProvider
from .mock import MockProvider

__all__ = [
    "DictionaryProvider",
    "GoogleProvider",
    "LibreTranslateProvider",
    "MockProvider",
]
