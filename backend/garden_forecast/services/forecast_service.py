"""作物予測サービス。

カタログデータと計算ロジックを組み合わせ、作物ごとの
収量・植え付けカレンダー・リスク・推奨事項を生成する。
"""

from __future__ import annotations

import logging
from typing import Any

from garden_forecast.config import settings
from garden_forecast.core.exceptions import NotFoundError
from garden_forecast.schemas.catalog import ClimateZone, CropSummary, Region
from garden_forecast.schemas.forecast import (
    CropForecast,
    CropProfile,
    ForecastRequest,
    ForecastResponse,
    NumericRange,
    ProductionMetrics,
)
from garden_forecast.services.calculations import (
    assess_risk_factors,
    calculate_planting_calendar,
    calculate_yield,
)
from garden_forecast.services.catalog import CatalogRepository
from garden_forecast.services.formatters import (
    format_forecast_response,
    format_planting_calendar,
    format_recommendations,
    format_risk_factors,
)

logger = logging.getLogger(__name__)

DEFAULT_BEGINNER_TIP = (
    "Start with a smaller growing area and focus on proper watering and pest monitoring."
)
DEFAULT_ADVANCED_TIP = (
    "Consider succession planting every 2-3 weeks for continuous harvest."
)


def _optional_range(value: dict[str, float] | None) -> NumericRange | None:
    if not value:
        return None
    return NumericRange(min=value["min"], max=value["max"])


def generate_recommendations(
    crop: dict[str, Any],
    climate: dict[str, Any],
    environment: str,
    risk_factors: list[dict[str, Any]],
    experience: str,
) -> list[dict[str, str]]:
    """作物・気候・環境・リスク・経験から推奨事項を組み立てる。

    Returns:
        ``{"category": str, "text": str}`` のリスト（カテゴリ未集約）。
    """
    recommendations: list[dict[str, str]] = []

    varieties = (crop.get("recommendedVarieties") or {}).get(climate["id"])
    if varieties:
        recommendations.append({
            "category": "Variety Selection",
            "text": (
                f"Consider {climate['name']}-appropriate varieties like "
                f"{', '.join(varieties)}."
            ),
        })

    if environment == "open":
        recommendations.append({
            "category": "Planting Strategy",
            "text": (
                f"Start seeds indoors {crop.get('seedStartWeeks')} weeks before "
                "outdoor planting date for stronger transplants."
            ),
        })
    elif environment in ("protected", "cooled"):
        recommendations.append({
            "category": "Planting Strategy",
            "text": (
                f"In your {environment} environment, you can extend growing seasons "
                f"by {crop.get('protectedExtensionWeeks')} weeks."
            ),
        })

    spacing = crop.get("spacing")
    if spacing:
        recommendations.append({
            "category": "Spacing",
            "text": (
                f"Plant {spacing['min']}-{spacing['max']} cm apart for optimal "
                "growth and air circulation."
            ),
        })

    if experience == "beginner":
        recommendations.append({
            "category": "Beginner Tips",
            "text": crop.get("beginnerTips") or DEFAULT_BEGINNER_TIP,
        })
    elif experience == "advanced":
        recommendations.append({
            "category": "Advanced Techniques",
            "text": crop.get("advancedTips") or DEFAULT_ADVANCED_TIP,
        })

    for risk in risk_factors:
        if risk.get("mitigation"):
            recommendations.append({
                "category": f"{risk['category']} Mitigation",
                "text": risk["mitigation"],
            })

    return recommendations


class ForecastService:
    """作物予測を生成するサービスクラス。"""

    def __init__(self, catalog: CatalogRepository) -> None:
        self.catalog = catalog

    # ------------------------------------------------------------------
    # 予測
    # ------------------------------------------------------------------

    def calculate_forecast(
        self,
        request: ForecastRequest,
        crop_id: str,
    ) -> CropForecast:
        """1作物分の予測を算出する。

        Args:
            request: 予測リクエスト。
            crop_id: 対象作物ID。

        Returns:
            作物予測。

        Raises:
            NotFoundError: 作物または気候帯がカタログに存在しない場合。
        """
        crop = self.catalog.get_crop(crop_id)
        if crop is None:
            logger.warning("Crop data not found for %s", crop_id)
            raise NotFoundError(f"Crop data not found for {crop_id}")

        climate = self.catalog.get_climate(request.climate)
        if climate is None:
            logger.warning("Climate data not found for %s", request.climate)
            raise NotFoundError(f"Climate data not found for {request.climate}")

        yield_per_m2 = calculate_yield(
            crop["baseYield"],
            climate,
            request.environment,
            self.catalog.get_yield_factors(),
            crop_id,
            request.experience,
        )
        total_yield = NumericRange(
            min=round(yield_per_m2["min"] * request.area, 1),
            max=round(yield_per_m2["max"] * request.area, 1),
        )

        calendar = calculate_planting_calendar(
            crop.get("plantingMonths") or {},
            climate,
            request.environment,
        )
        risk_factors = assess_risk_factors(
            crop.get("risks"),
            climate,
            request.environment,
        )
        recommendations = generate_recommendations(
            crop,
            climate,
            request.environment,
            risk_factors,
            request.experience,
        )

        return CropForecast(
            crop_profile=CropProfile(
                name=crop["name"],
                scientific_name=crop.get("scientificName"),
                life_cycle=crop.get("lifeCycle"),
                growth_pattern=crop.get("growthPattern"),
                yield_per_square_meter=NumericRange(**yield_per_m2),
                key_requirements=crop.get("keyRequirements"),
            ),
            planting_calendar=format_planting_calendar(calendar),
            production_metrics=ProductionMetrics(
                total_yield=total_yield,
                time_to_harvest=_optional_range(crop.get("timeToHarvest")),
                harvest_duration=_optional_range(crop.get("harvestDuration")),
                maintenance_level=crop.get("maintenanceLevel"),
            ),
            risk_factors=format_risk_factors(risk_factors),
            recommendations=format_recommendations(recommendations),
        )

    def generate_forecast(self, request: ForecastRequest) -> ForecastResponse:
        """リクエストされた全作物の予測を生成する。

        作物未指定（``None``）時は ``settings.DEFAULT_CROPS`` を使用する。
        空リストは空の結果になる。
        """
        if request.crops is None:
            crops = list(settings.DEFAULT_CROPS)
        else:
            crops = request.crops
        logger.info(
            "Generating forecast for %d crop(s): climate=%s environment=%s",
            len(crops),
            request.climate,
            request.environment,
        )

        results = {
            crop_id: self.calculate_forecast(request, crop_id) for crop_id in crops
        }
        params = request.model_dump(
            include={"country", "region", "climate", "environment", "area"},
        )
        return format_forecast_response(results, params)

    # ------------------------------------------------------------------
    # カタログ
    # ------------------------------------------------------------------

    def get_available_crops(self) -> list[CropSummary]:
        return self.catalog.list_crops()

    def get_climate_zones(self) -> list[ClimateZone]:
        return self.catalog.list_climate_zones()

    def get_regions_by_country(self, country: str) -> list[Region]:
        return self.catalog.list_regions(country)
