"""予測関連のPydanticスキーマ。

予測リクエスト、作物プロフィール、カレンダー、生産指標、
リスク要因、推奨事項、レスポンス全体のスキーマを定義する。
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field

from garden_forecast.schemas.calendar import CalendarSummaryResponse, Suitability

Environment = Literal["open", "protected", "cooled"]
Experience = Literal["beginner", "intermediate", "advanced"]


# ---------------------------------------------------------------------------
# リクエスト
# ---------------------------------------------------------------------------

class ForecastRequest(BaseModel):
    """予測生成リクエスト。"""

    country: str | None = Field(default=None, description="国コード")
    region: str | None = Field(default=None, description="地域ID")
    climate: str = Field(..., min_length=1, description="気候帯ID")
    environment: Environment = Field(..., description="栽培環境")
    area: float = Field(..., gt=0, description="栽培面積（平方メートル）")
    crops: list[str] | None = Field(
        default=None,
        description="作物IDリスト（未指定時は既定の5作物）",
    )
    experience: Experience = "intermediate"


# ---------------------------------------------------------------------------
# 作物プロフィール・生産指標
# ---------------------------------------------------------------------------

class NumericRange(BaseModel):
    """最小値・最大値の組。"""

    min: float
    max: float


class CropProfile(BaseModel):
    """作物プロフィール。"""

    name: str
    scientific_name: str | None = None
    life_cycle: str | None = None
    growth_pattern: str | None = None
    yield_per_square_meter: NumericRange
    key_requirements: str | None = None


class ProductionMetrics(BaseModel):
    """生産指標。"""

    total_yield: NumericRange
    time_to_harvest: NumericRange | None = Field(default=None, description="日数")
    harvest_duration: NumericRange | None = Field(default=None, description="週数")
    maintenance_level: str | None = None


# ---------------------------------------------------------------------------
# 植え付けカレンダー
# ---------------------------------------------------------------------------

class CalendarMonth(BaseModel):
    """整形済みカレンダーの1か月分。"""

    month: str
    short_month: str
    month_number: int = Field(..., ge=1, le=12)
    suitability: Suitability
    suitability_score: int = Field(..., ge=0, le=3)


class PlantingPeriods(BaseModel):
    """適性ごとの期間文字列（年末年始をまたぐ期間は統合済み）。"""

    optimal: list[str] = Field(default_factory=list)
    suitable: list[str] = Field(default_factory=list)
    risky: list[str] = Field(default_factory=list)


class PlantingCalendar(BaseModel):
    """整形済み植え付けカレンダー。"""

    monthly_data: list[CalendarMonth]
    periods: PlantingPeriods
    summary: CalendarSummaryResponse


# ---------------------------------------------------------------------------
# リスク・推奨事項
# ---------------------------------------------------------------------------

class RiskFactor(BaseModel):
    """評価済みリスク要因。"""

    category: str
    description: str
    severity: str
    severity_score: int
    mitigation: str | None = None


class RecommendationGroup(BaseModel):
    """カテゴリ別の推奨事項。"""

    category: str
    recommendations: list[str]


# ---------------------------------------------------------------------------
# レスポンス
# ---------------------------------------------------------------------------

class CropForecast(BaseModel):
    """1作物分の予測結果。"""

    crop_profile: CropProfile
    planting_calendar: PlantingCalendar
    production_metrics: ProductionMetrics
    risk_factors: list[RiskFactor]
    recommendations: list[RecommendationGroup]


class ForecastMeta(BaseModel):
    """予測レスポンスのメタ情報。"""

    generated: datetime
    params: dict[str, Any]


class ForecastResponse(BaseModel):
    """予測レスポンス。"""

    meta: ForecastMeta
    crops: dict[str, CropForecast]
