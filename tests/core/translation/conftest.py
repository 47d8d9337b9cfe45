"""
翻訳テスト共通のヘルパー
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple, Union

import pytest

from transadapt.translation.base import TranslationProvider
from transadapt.translation.cancellation import CancellationToken, sleep
from transadapt.translation.request import TranslationRequest
from transadapt.translation.result import TranslationResponse


class ScriptedProvider(TranslationProvider):
    """呼び出しごとに outcomes を順に返す（例外なら送出する）テスト用プロバイダ"""

    def __init__(
        self,
        outcomes: Sequence[Union[str, BaseException]] = ("ok",),
        call_delay: float = 0.0,
    ):
        super().__init__()
        self._outcomes = list(outcomes)
        self._call_delay = call_delay
        self.calls = 0
        self.release_count = 0

    async def _translate(
        self,
        request: TranslationRequest,
        cancel_token: Optional[CancellationToken],
    ) -> TranslationResponse:
        self.calls += 1
        if self._call_delay:
            await sleep(self._call_delay, cancel_token)
        outcome = self._outcomes.pop(0) if len(self._outcomes) > 1 else self._outcomes[0]
        if isinstance(outcome, BaseException):
            raise outcome
        return TranslationResponse.final(outcome, request)

    async def _release(self) -> None:
        self.release_count += 1

    def get_translator_name(self) -> str:
        return "scripted"

    def get_supported_pairs(self) -> List[Tuple[str, str]]:
        return []


@pytest.fixture
def hello_request() -> TranslationRequest:
    return TranslationRequest("Hello world", "en", "uk")


@pytest.fixture
def make_provider():
    """ScriptedProvider のファクトリー"""
    return ScriptedProvider
