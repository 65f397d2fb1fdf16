"""FastAPI依存性注入モジュール。

カタログリポジトリ、予測サービス、リクエスト制限を提供する。
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends, Request

from garden_forecast.config import settings
from garden_forecast.core.rate_limiter import ClientRateLimiter, get_rate_limiter
from garden_forecast.services.catalog import CatalogRepository
from garden_forecast.services.forecast_service import ForecastService

# ---------------------------------------------------------------------------
# サービス
# ---------------------------------------------------------------------------


@lru_cache
def get_catalog() -> CatalogRepository:
    """設定のデータディレクトリを参照するカタログリポジトリ（プロセス内共有）。"""
    return CatalogRepository(settings.DATA_DIR)


def get_forecast_service(
    catalog: CatalogRepository = Depends(get_catalog),
) -> ForecastService:
    """予測サービスを生成する。"""
    return ForecastService(catalog)


# ---------------------------------------------------------------------------
# リクエスト制限
# ---------------------------------------------------------------------------


async def enforce_rate_limit(
    request: Request,
    limiter: ClientRateLimiter = Depends(get_rate_limiter),
) -> None:
    """クライアントIPごとのリクエスト数を記録し、超過時は429を返す。

    Raises:
        RateLimitExceededError: 上限を超えた場合。
    """
    client = request.client.host if request.client else "unknown"
    await limiter.acquire(client)
