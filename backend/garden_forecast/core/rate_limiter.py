"""クライアント単位のリクエスト制限モジュール。

固定ウィンドウ内のリクエスト数を数え、上限を超えたクライアントを
一定時間ブロックする。状態はプロセス内メモリにのみ保持する。
"""

from __future__ import annotations

import asyncio
import math
import time
from typing import Callable, Optional

from garden_forecast.config import settings
from garden_forecast.core.exceptions import RateLimitExceededError


class ClientRateLimiter:
    """固定ウィンドウ方式のクライアント別レート制限。

    Attributes:
        window: 計測ウィンドウ（秒）。
        max_requests: ウィンドウ内で許可するリクエスト数。
        block_duration: 上限超過後のブロック時間（秒）。
    """

    def __init__(
        self,
        window: float,
        max_requests: int,
        block_duration: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """ClientRateLimiterを初期化する。

        Args:
            window: 計測ウィンドウ（秒）。
            max_requests: ウィンドウ内の許可リクエスト数。
            block_duration: ブロック時間（秒）。
            clock: 現在時刻を返す関数。テストで差し替える。
        """
        self.window = window
        self.max_requests = max_requests
        self.block_duration = block_duration
        self._clock = clock
        # client -> (ウィンドウ開始時刻, リクエスト数)
        self._counts: dict[str, tuple[float, int]] = {}
        # client -> ブロック解除時刻
        self._blocked: dict[str, float] = {}
        self._lock = asyncio.Lock()

    def _prune(self, now: float) -> None:
        """期限切れのカウントとブロックを削除する。"""
        self._counts = {
            client: entry
            for client, entry in self._counts.items()
            if now - entry[0] <= self.window
        }
        self._blocked = {
            client: until for client, until in self._blocked.items() if now < until
        }

    async def acquire(self, client: str) -> None:
        """リクエストを1件記録する。

        Args:
            client: クライアント識別子（IPアドレス等）。

        Raises:
            RateLimitExceededError: ブロック中、または今回で上限を超えた場合。
        """
        async with self._lock:
            now = self._clock()
            self._prune(now)

            blocked_until = self._blocked.get(client)
            if blocked_until is not None:
                remaining_mins = math.ceil((blocked_until - now) / 60)
                raise RateLimitExceededError(
                    f"Too many requests. Please try again in {remaining_mins} minute(s).",
                )

            started, count = self._counts.get(client, (now, 0))
            count += 1
            self._counts[client] = (started, count)

            if count > self.max_requests:
                self._blocked[client] = now + self.block_duration
                raise RateLimitExceededError()

    def reset(self) -> None:
        """全クライアントの状態を破棄する。"""
        self._counts.clear()
        self._blocked.clear()


# ---------------------------------------------------------------------------
# シングルトン
# ---------------------------------------------------------------------------

_rate_limiter: Optional[ClientRateLimiter] = None


def get_rate_limiter() -> ClientRateLimiter:
    """ClientRateLimiterのシングルトンインスタンスを取得する。

    Returns:
        設定値から生成したClientRateLimiterインスタンス。
    """
    global _rate_limiter
    if _rate_limiter is None:
        _rate_limiter = ClientRateLimiter(
            window=settings.RATE_LIMIT_WINDOW_SECONDS,
            max_requests=settings.RATE_LIMIT_MAX_REQUESTS,
            block_duration=settings.RATE_LIMIT_BLOCK_SECONDS,
        )
    return _rate_limiter
