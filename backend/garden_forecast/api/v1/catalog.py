"""カタログエンドポイント。

作物・気候帯・地域の一覧を返却するAPIを提供する。
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from garden_forecast.api.deps import get_forecast_service
from garden_forecast.schemas.catalog import (
    ClimateZoneListResponse,
    CropListResponse,
    RegionListResponse,
)
from garden_forecast.services.forecast_service import ForecastService

router = APIRouter()


@router.get(
    "/crops",
    response_model=CropListResponse,
    summary="作物一覧",
)
async def list_crops(
    service: ForecastService = Depends(get_forecast_service),
) -> CropListResponse:
    """予測可能な作物の一覧を返す。"""
    return CropListResponse(crops=service.get_available_crops())


@router.get(
    "/climate-zones",
    response_model=ClimateZoneListResponse,
    summary="気候帯一覧",
)
async def list_climate_zones(
    service: ForecastService = Depends(get_forecast_service),
) -> ClimateZoneListResponse:
    """気候帯の一覧を返す。"""
    return ClimateZoneListResponse(climate_zones=service.get_climate_zones())


@router.get(
    "/regions/{country}",
    response_model=RegionListResponse,
    summary="地域一覧",
)
async def list_regions(
    country: str,
    service: ForecastService = Depends(get_forecast_service),
) -> RegionListResponse:
    """国コードに属する地域を返す。未知の国コードは空リスト。"""
    return RegionListResponse(
        country=country,
        regions=service.get_regions_by_country(country),
    )
