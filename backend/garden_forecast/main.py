"""家庭菜園予測APIのエントリポイント。

起動時に作物カタログを読み込み、CORS・例外ハンドラ・``/api/v1`` 配下の
予測／カレンダー／カタログ各ルーターを組み立てる。
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from garden_forecast.api.deps import get_catalog
from garden_forecast.api.v1.router import router as api_v1_router
from garden_forecast.config import settings
from garden_forecast.core.exceptions import register_exception_handlers

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """作物カタログを事前に読み込み、起動・停止をログに残す。

    データファイルが壊れている場合は ``CatalogError`` で起動に失敗する。
    """
    crops = get_catalog().list_crops()
    logger.info(
        "Garden forecast API started: %d crop(s) loaded from %s",
        len(crops),
        settings.DATA_DIR,
    )

    yield

    logger.info("Garden forecast API stopped")


app = FastAPI(
    title="Garden Forecast API",
    description="気候帯・栽培環境に基づく家庭菜園の収量・植え付け時期予測API",
    version="1.0.0",
    lifespan=lifespan,
)

# フロントエンドからの呼び出し元
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# /api/v1/forecast, /api/v1/calendar, /api/v1/crops 等
app.include_router(api_v1_router, prefix="/api/v1")


@app.get("/health", tags=["health"])
async def health_check() -> dict[str, str]:
    """稼働確認用。"""
    return {"status": "ok"}
