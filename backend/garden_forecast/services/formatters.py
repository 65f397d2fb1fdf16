"""予測結果のレスポンス整形。

生のカレンダー・リスク・推奨事項をクライアント表示用のスキーマに変換する。
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from garden_forecast.core.periods import (
    find_periods,
    format_period,
    month_name,
    short_month_name,
)
from garden_forecast.schemas.calendar import MonthSuitability
from garden_forecast.schemas.forecast import (
    CalendarMonth,
    CropForecast,
    ForecastMeta,
    ForecastResponse,
    PlantingCalendar,
    PlantingPeriods,
    RecommendationGroup,
    RiskFactor,
)
from garden_forecast.services.calendar_service import summarize_calendar

SUITABILITY_SCORES: dict[str, int] = {"optimal": 3, "suitable": 2, "risky": 1}
SEVERITY_SCORES: dict[str, int] = {"high": 3, "medium": 2, "low": 1}


def suitability_score(suitability: str) -> int:
    """適性タグの数値スコア（optimal=3 〜 not_recommended=0）。"""
    return SUITABILITY_SCORES.get(suitability, 0)


def severity_score(severity: str) -> int:
    """深刻度の数値スコア（high=3 〜 不明=0）。"""
    return SEVERITY_SCORES.get(severity, 0)


# ---------------------------------------------------------------------------
# カレンダー
# ---------------------------------------------------------------------------

def format_planting_calendar(calendar: list[dict[str, Any]]) -> PlantingCalendar:
    """``calculate_planting_calendar`` の結果を表示用に整形する。

    ``periods`` は年末年始をまたぐ期間を統合した一覧、
    ``summary`` はカレンダー画面と同じ非循環の要約文字列。

    Args:
        calendar: ``{"month": int, "suitability": str}`` のリスト。

    Returns:
        整形済みカレンダー。
    """
    records = [
        MonthSuitability(
            month_number=item["month"],
            suitability=item["suitability"],
            suitability_score=suitability_score(item["suitability"]),
        )
        for item in calendar
    ]

    monthly_data = [
        CalendarMonth(
            month=month_name(record.month_number),
            short_month=short_month_name(record.month_number),
            month_number=record.month_number,
            suitability=record.suitability,
            suitability_score=suitability_score(record.suitability),
        )
        for record in records
    ]

    periods: dict[str, list[str]] = {}
    for tag in ("optimal", "suitable", "risky"):
        selected = [record for record in records if record.suitability == tag]
        periods[tag] = [
            format_period(period) for period in find_periods(selected, wrap_year=True)
        ]

    return PlantingCalendar(
        monthly_data=monthly_data,
        periods=PlantingPeriods(**periods),
        summary=summarize_calendar(records),
    )


# ---------------------------------------------------------------------------
# リスク・推奨事項
# ---------------------------------------------------------------------------

def format_risk_factors(risk_factors: list[dict[str, Any]]) -> list[RiskFactor]:
    """リスク要因にスコアを付与し、深刻度の高い順に並べる。"""
    formatted = [
        RiskFactor(
            category=risk["category"],
            description=risk.get("description", ""),
            severity=risk["severity"],
            severity_score=severity_score(risk["severity"]),
            mitigation=risk.get("mitigation") or None,
        )
        for risk in risk_factors
    ]
    return sorted(formatted, key=lambda risk: risk.severity_score, reverse=True)


def format_recommendations(
    recommendations: list[dict[str, str]],
) -> list[RecommendationGroup]:
    """推奨事項をカテゴリ単位にまとめる（初出順）。"""
    grouped: dict[str, list[str]] = {}
    for rec in recommendations:
        grouped.setdefault(rec["category"], []).append(rec["text"])

    return [
        RecommendationGroup(category=category, recommendations=texts)
        for category, texts in grouped.items()
    ]


# ---------------------------------------------------------------------------
# レスポンス全体
# ---------------------------------------------------------------------------

def format_forecast_response(
    forecast_results: dict[str, CropForecast],
    params: dict[str, Any],
) -> ForecastResponse:
    """作物ごとの予測結果にメタ情報を付与する。"""
    return ForecastResponse(
        meta=ForecastMeta(generated=datetime.now(timezone.utc), params=params),
        crops=forecast_results,
    )
