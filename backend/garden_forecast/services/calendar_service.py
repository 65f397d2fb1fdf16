"""植え付けカレンダー表示用サービス。

適性ごとの推奨期間サマリーと、選択月の詳細情報を組み立てる。
"""

from __future__ import annotations

from collections.abc import Sequence

from garden_forecast.core.periods import month_name, summarize_periods
from garden_forecast.schemas.calendar import (
    CalendarSummaryResponse,
    MonthDetail,
    MonthSuitability,
)

SUITABILITY_LABELS: dict[str, str] = {
    "optimal": "Optimal",
    "suitable": "Suitable",
    "risky": "Risky",
}

NOT_RECOMMENDED_LABEL = "Not Recommended"
NOT_RECOMMENDED_NOTE = (
    "Not a suitable time for planting this crop in your climate and environment."
)


def suitability_label(suitability: str | None) -> str:
    """適性タグの表示名。未知のタグは Not Recommended。"""
    return SUITABILITY_LABELS.get(suitability or "", NOT_RECOMMENDED_LABEL)


def suitability_css_class(suitability: str | None) -> str:
    """適性タグに対応するCSSクラス名。"""
    if suitability in SUITABILITY_LABELS:
        return suitability  # type: ignore[return-value]
    return "not-recommended"


def summarize_calendar(calendar: Sequence[MonthSuitability]) -> CalendarSummaryResponse:
    """カレンダーを適性ごとの推奨期間に要約する。

    ``optimal`` は該当月がなくても ``"None"`` として返す。
    ``suitable`` / ``risky`` は該当月がある場合のみ設定する。

    Args:
        calendar: 月別適性レコード。

    Returns:
        適性ごとの期間文字列。
    """
    by_tag: dict[str, list[MonthSuitability]] = {}
    for record in calendar:
        by_tag.setdefault(record.suitability, []).append(record)

    return CalendarSummaryResponse(
        optimal=summarize_periods(by_tag.get("optimal")),
        suitable=summarize_periods(by_tag["suitable"]) if "suitable" in by_tag else None,
        risky=summarize_periods(by_tag["risky"]) if "risky" in by_tag else None,
    )


def describe_month(
    calendar: Sequence[MonthSuitability],
    month_number: int,
) -> MonthDetail:
    """選択された月の適性と注記を返す。

    カレンダーに存在しない月は Not Recommended として扱う。
    """
    name = month_name(month_number)
    record = next(
        (item for item in calendar if item.month_number == month_number),
        None,
    )

    if record is None:
        return MonthDetail(
            month_number=month_number,
            month_name=name,
            suitability="not_recommended",
            label=NOT_RECOMMENDED_LABEL,
            css_class=suitability_css_class(None),
            notes=NOT_RECOMMENDED_NOTE,
        )

    label = suitability_label(record.suitability)
    return MonthDetail(
        month_number=month_number,
        month_name=name,
        suitability=record.suitability,
        label=label,
        css_class=suitability_css_class(record.suitability),
        notes=record.notes or f"{label} time for planting.",
    )
