"""植え付けカレンダーエンドポイント。

月別適性レコードから推奨期間サマリーと月詳細を返すAPIを提供する。
"""

from __future__ import annotations

from fastapi import APIRouter, Path

from garden_forecast.schemas.calendar import (
    CalendarRequest,
    CalendarSummaryResponse,
    MonthDetail,
)
from garden_forecast.services.calendar_service import describe_month, summarize_calendar

router = APIRouter()


@router.post(
    "/summary",
    response_model=CalendarSummaryResponse,
    response_model_exclude_none=True,
    summary="推奨植え付け期間サマリー",
)
async def get_calendar_summary(body: CalendarRequest) -> CalendarSummaryResponse:
    """カレンダーを適性ごとの連続期間に要約する。

    ``optimal`` は常に含まれ、該当月がなければ ``"None"``。
    ``suitable`` / ``risky`` は該当月がある場合のみ含まれる。
    """
    return summarize_calendar(body.calendar)


@router.post(
    "/month/{month_number}",
    response_model=MonthDetail,
    summary="月詳細",
)
async def get_month_detail(
    body: CalendarRequest,
    month_number: int = Path(..., ge=1, le=12, description="月番号（1〜12）"),
) -> MonthDetail:
    """指定月の適性・表示名・注記を返す。"""
    return describe_month(body.calendar, month_number)
