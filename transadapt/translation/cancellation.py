"""
協調的キャンセル

CancellationToken は呼び出し側とプロバイダ・リトライ処理が共有するシグナル。
待機（バックエンド応答、バックオフ、チャンク間遅延）はすべてトークンを経由し、
キャンセル時は待機完了を待たずに TranslationCancelledError を送出する。

asyncio のタスクキャンセル（CancelledError）はそのまま再送出する（asyncio の規約）。
"""

from __future__ import annotations

import asyncio
import contextlib
from typing import Awaitable, Optional, TypeVar

from .exceptions import TranslationCancelledError

T = TypeVar("T")


class CancellationToken:
    """
    キャンセルシグナル

    Examples:
        >>> token = CancellationToken()
        >>> task = asyncio.create_task(translator.translate(request, token))
        >>> token.cancel()  # translate は TranslationCancelledError で終了
    """

    def __init__(self) -> None:
        self._event = asyncio.Event()
        self._reason: Optional[str] = None

    def cancel(self, reason: Optional[str] = None) -> None:
        """キャンセルを要求（2 回目以降は無視）"""
        if self._event.is_set():
            return
        self._reason = reason
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    @property
    def reason(self) -> Optional[str]:
        return self._reason

    def raise_if_cancelled(self) -> None:
        """キャンセル済みなら TranslationCancelledError を送出"""
        if self._event.is_set():
            raise TranslationCancelledError(self._message())

    async def sleep(self, delay: float) -> None:
        """
        キャンセル可能な待機

        Args:
            delay: 待機時間（秒）

        Raises:
            TranslationCancelledError: 待機前または待機中にキャンセルされた場合
        """
        self.raise_if_cancelled()
        if delay <= 0:
            await asyncio.sleep(0)
            self.raise_if_cancelled()
            return
        try:
            await asyncio.wait_for(self._event.wait(), timeout=delay)
        except asyncio.TimeoutError:
            return
        raise TranslationCancelledError(self._message())

    async def guard(self, awaitable: Awaitable[T]) -> T:
        """
        awaitable をキャンセルと競合させて実行

        キャンセルが先に来た場合は実行中の処理をキャンセルし、
        部分的な結果を返さずに TranslationCancelledError を送出する。
        """
        if self._event.is_set():
            if asyncio.iscoroutine(awaitable):
                awaitable.close()
            raise TranslationCancelledError(self._message())
        work = asyncio.ensure_future(awaitable)
        waiter = asyncio.ensure_future(self._event.wait())
        try:
            await asyncio.wait({work, waiter}, return_when=asyncio.FIRST_COMPLETED)
        except asyncio.CancelledError:
            work.cancel()
            raise
        finally:
            waiter.cancel()

        if work.done():
            return work.result()

        work.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await work
        raise TranslationCancelledError(self._message())

    def _message(self) -> str:
        if self._reason:
            return f"Translation was cancelled: {self._reason}"
        return "Translation was cancelled"


async def sleep(delay: float, token: Optional[CancellationToken] = None) -> None:
    """トークン指定がなければ通常の asyncio.sleep"""
    if token is None:
        await asyncio.sleep(delay)
    else:
        await token.sleep(delay)


async def guard(awaitable: Awaitable[T], token: Optional[CancellationToken] = None) -> T:
    """トークン指定がなければそのまま await"""
    if token is None:
        return await awaitable
    return await token.guard(awaitable)


def raise_if_cancelled(token: Optional[CancellationToken]) -> None:
    if token is not None:
        token.raise_if_cancelled()
