"""
翻訳プロバイダのメタデータ管理

プロバイダの登録情報とファクトリー生成用メタデータを管理する。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass
class ProviderInfo:
    """翻訳プロバイダのメタデータ"""

    provider_id: str
    display_name: str
    description: str
    module: str  # e.g., ".impl.mock"
    class_name: str  # e.g., "MockProvider"
    supported_pairs: List[Tuple[str, str]]  # 空リストは全ペア対応
    requires_network: bool = False  # ネットワーク接続が必要か
    supports_streaming: bool = False  # ネイティブにインクリメンタル翻訳できるか
    default_params: Dict[str, Any] = field(default_factory=dict)


class TranslatorMetadata:
    """翻訳プロバイダのメタデータ管理"""

    _PROVIDERS: Dict[str, ProviderInfo] = {
        "mock": ProviderInfo(
            provider_id="mock",
            display_name="Mock",
            description="Offline mock provider producing '[target] text'",
            module=".impl.mock",
            class_name="MockProvider",
            supported_pairs=[],
            supports_streaming=True,
            default_params={"chunk_delay": 0.05},
        ),
        "dictionary": ProviderInfo(
            provider_id="dictionary",
            display_name="Dictionary",
            description="In-memory phrase dictionary (en, uk, de)",
            module=".impl.dictionary",
            class_name="DictionaryProvider",
            supported_pairs=[
                ("en", "uk"),
                ("uk", "en"),
                ("uk", "de"),
                ("de", "uk"),
            ],
            supports_streaming=True,
        ),
        "libretranslate": ProviderInfo(
            provider_id="libretranslate",
            display_name="LibreTranslate",
            description="LibreTranslate-compatible HTTP API (via httpx)",
            module=".impl.libretranslate",
            class_name="LibreTranslateProvider",
            supported_pairs=[],  # サーバー側で判定
            requires_network=True,
        ),
        "google": ProviderInfo(
            provider_id="google",
            display_name="Google Translate",
            description="Google Translate (via deep-translator)",
            module=".impl.google",
            class_name="GoogleProvider",
            supported_pairs=[],  # ほぼ全言語対応
            requires_network=True,
        ),
    }

    @classmethod
    def get(cls, provider_id: str) -> Optional[ProviderInfo]:
        """
        プロバイダのメタデータを取得

        Returns:
            ProviderInfo、見つからない場合は None
        """
        return cls._PROVIDERS.get(provider_id)

    @classmethod
    def get_all(cls) -> Dict[str, ProviderInfo]:
        """
        全てのプロバイダメタデータを取得

        Returns:
            プロバイダID をキーとした ProviderInfo の辞書
        """
        return cls._PROVIDERS.copy()

    @classmethod
    def get_providers_for_pair(cls, source: str, target: str) -> List[str]:
        """
        指定された言語ペアをサポートするプロバイダを取得

        Args:
            source: ソース言語コード
            target: ターゲット言語コード

        Returns:
            プロバイダIDのリスト
        """
        pair = (source.lower(), target.lower())
        return [
            pid
            for pid, info in cls._PROVIDERS.items()
            if not info.supported_pairs or pair in info.supported_pairs
        ]

    @classmethod
    def list_provider_ids(cls) -> List[str]:
        """
        登録済みプロバイダIDのリストを取得

        Returns:
            プロバイダIDのリスト
        """
        return list(cls._PROVIDERS.keys())
