"""
翻訳プロバイダのファクトリー

TranslatorFactory はプロバイダと、それをラップした高レベル Translator を
組み立てるためのファクトリークラス。どのプロバイダを使うかは
ここ（組み立て時）で決まり、呼び出し側は Translator だけを扱う。
"""

from __future__ import annotations

import importlib
import logging
from typing import TYPE_CHECKING, Any, Mapping, Optional

from .adapter import ResilientTranslator
from .facade import Translator
from .metadata import TranslatorMetadata
from .retry import RetryPolicy

if TYPE_CHECKING:
    from .base import TranslationProvider

logger = logging.getLogger(__name__)


class TranslatorFactory:
    """翻訳プロバイダを作成するファクトリークラス"""

    @classmethod
    def create_provider(
        cls,
        provider_type: str,
        **provider_options,
    ) -> TranslationProvider:
        """
        指定されたタイプのプロバイダを作成

        Args:
            provider_type: プロバイダタイプ
                利用可能: mock, dictionary, libretranslate, google
            **provider_options: プロバイダ固有のパラメータ

        Returns:
            TranslationProvider のインスタンス

        Raises:
            ValueError: 不明なプロバイダタイプが指定された場合

        Examples:
            >>> provider = TranslatorFactory.create_provider("mock", chunk_delay=0)

            >>> provider = TranslatorFactory.create_provider(
            ...     "libretranslate",
            ...     endpoint="https://libretranslate.com/translate",
            ...     api_key="...",
            ... )
        """
        metadata = TranslatorMetadata.get(provider_type)
        if metadata is None:
            available = TranslatorMetadata.list_provider_ids()
            raise ValueError(
                f"Unknown provider type: {provider_type}. " f"Available: {available}"
            )

        # default_params と options をマージ
        params = {**metadata.default_params, **provider_options}

        module = importlib.import_module(metadata.module, package="transadapt.translation")
        provider_class = getattr(module, metadata.class_name)
        logger.debug("Creating provider %s with %s", provider_type, sorted(params))
        return provider_class(**params)

    @classmethod
    def create_translator(
        cls,
        provider_type: str,
        retry_policy: Optional[RetryPolicy] = None,
        **provider_options,
    ) -> Translator:
        """
        プロバイダ → ResilientTranslator → Translator を組み立てる

        Args:
            provider_type: プロバイダタイプ
            retry_policy: リトライ設定（省略時: 3 回, 0.2 秒から倍々）
            **provider_options: プロバイダ固有のパラメータ

        Returns:
            Translator

        Examples:
            >>> async with TranslatorFactory.create_translator("mock") as translator:
            ...     response = await translator.translate(request)
        """
        provider = cls.create_provider(provider_type, **provider_options)
        return Translator(ResilientTranslator(provider, retry_policy))

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> Translator:
        """
        設定辞書から Translator を組み立てる

        Args:
            config: transadapt.config 形式の設定（"translation" セクションを使用）

        Returns:
            Translator
        """
        translation = config.get("translation", {})
        provider_type = translation.get("provider", "mock")

        retry = translation.get("retry", {})
        policy = RetryPolicy(
            max_attempts=retry.get("max_attempts", RetryPolicy.max_attempts),
            base_delay=retry.get("base_delay", RetryPolicy.base_delay),
            multiplier=retry.get("multiplier", RetryPolicy.multiplier),
        )

        options = dict(translation.get("providers", {}).get(provider_type, {}))
        return cls.create_translator(provider_type, retry_policy=policy, **options)

    @classmethod
    def list_available_providers(cls) -> list[str]:
        """
        利用可能なプロバイダのリストを取得

        Returns:
            プロバイダIDのリスト
        """
        return TranslatorMetadata.list_provider_ids()
