"""API v1 ルーター集約モジュール。

各ドメインのルーターを統合し、プレフィックスとタグを設定する。
"""

from __future__ import annotations

from fastapi import APIRouter

from garden_forecast.api.v1.calendar import router as calendar_router
from garden_forecast.api.v1.catalog import router as catalog_router
from garden_forecast.api.v1.forecast import router as forecast_router

router = APIRouter()

router.include_router(
    forecast_router,
    prefix="/forecast",
    tags=["forecast"],
)

router.include_router(
    calendar_router,
    prefix="/calendar",
    tags=["calendar"],
)

router.include_router(
    catalog_router,
    tags=["catalog"],
)
