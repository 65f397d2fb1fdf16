"""予測エンドポイント。

作物ごとの収量・植え付けカレンダー・リスク・推奨事項を生成するAPIを提供する。
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from garden_forecast.api.deps import enforce_rate_limit, get_forecast_service
from garden_forecast.schemas.forecast import ForecastRequest, ForecastResponse
from garden_forecast.services.forecast_service import ForecastService

router = APIRouter()


@router.post(
    "",
    response_model=ForecastResponse,
    summary="作物予測生成",
    dependencies=[Depends(enforce_rate_limit)],
)
async def generate_forecast(
    body: ForecastRequest,
    service: ForecastService = Depends(get_forecast_service),
) -> ForecastResponse:
    """気候帯・栽培環境・面積から作物予測を生成する。

    ``crops`` 未指定時は既定の5作物について予測する。
    カタログに存在しない作物・気候帯を指定した場合は404。

    Args:
        body: 予測リクエスト。
        service: 予測サービス。

    Returns:
        予測レスポンス。
    """
    return service.generate_forecast(body)
