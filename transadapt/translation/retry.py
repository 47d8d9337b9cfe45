"""
リトライ処理

指数バックオフによるリトライ機能を提供。
TranslationNetworkError（一時的エラー）のみをリトライし、
バックオフ中の待機はキャンセルシグナルで中断できる。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, TypeVar

from .cancellation import CancellationToken, raise_if_cancelled, sleep
from .exceptions import TranslationNetworkError

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_BASE_DELAY = 0.2


@dataclass(frozen=True)
class RetryPolicy:
    """リトライ設定"""

    max_attempts: int = DEFAULT_MAX_ATTEMPTS  # 初回を含む最大試行回数
    base_delay: float = DEFAULT_BASE_DELAY  # 初回リトライまでの待機時間（秒）
    multiplier: float = 2.0  # リトライごとの待機時間の倍率

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1 (got {self.max_attempts})")
        if self.base_delay < 0:
            raise ValueError(f"base_delay must be >= 0 (got {self.base_delay})")
        if self.multiplier < 1:
            raise ValueError(f"multiplier must be >= 1 (got {self.multiplier})")

    def delay_for(self, attempt: int) -> float:
        """
        attempt 回目の失敗後の待機時間

        Examples:
            >>> RetryPolicy().delay_for(1)
            0.2
            >>> RetryPolicy().delay_for(2)
            0.4
        """
        return self.base_delay * (self.multiplier ** (attempt - 1))


async def _backoff(delay: float, cancel_token: Optional[CancellationToken]) -> None:
    await sleep(delay, cancel_token)


async def retry_async(
    operation: Callable[[], Awaitable[T]],
    policy: Optional[RetryPolicy] = None,
    cancel_token: Optional[CancellationToken] = None,
    *,
    description: str = "Translation",
) -> T:
    """
    指数バックオフ付きで operation を実行

    - 成功した場合は結果をそのまま返す
    - TranslationNetworkError の場合、試行回数が max_attempts 未満なら
      バックオフ後に再試行する（待機時間は毎回 multiplier 倍）
    - 試行回数を使い切った場合、またはその他の例外の場合はそのまま送出する
    - バックオフ中のキャンセルは TranslationCancelledError となり再試行しない

    Args:
        operation: 1 回分の呼び出しを行うコルーチン関数
        policy: リトライ設定（デフォルト: 3 回, 0.2 秒から倍々）
        cancel_token: キャンセルシグナル
        description: ログ用の処理名

    Returns:
        operation の結果

    Examples:
        >>> await retry_async(
        ...     lambda: provider.translate(request, token),
        ...     RetryPolicy(max_attempts=3, base_delay=0.2),
        ...     token,
        ... )
    """
    policy = policy or RetryPolicy()
    attempt = 1
    delay = policy.base_delay
    while True:
        raise_if_cancelled(cancel_token)
        try:
            return await operation()
        except TranslationNetworkError as e:
            if attempt >= policy.max_attempts:
                logger.error(
                    "%s failed after %d attempts: %s",
                    description,
                    attempt,
                    e,
                )
                raise
            logger.warning(
                "%s failed (attempt %d/%d), retrying in %.2fs: %s",
                description,
                attempt,
                policy.max_attempts,
                delay,
                e,
            )
        await _backoff(delay, cancel_token)
        delay *= policy.multiplier
        attempt += 1
