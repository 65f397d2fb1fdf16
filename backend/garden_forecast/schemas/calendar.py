"""植え付けカレンダー関連のPydanticスキーマ。

月ごとの適性レコード、連続期間、カレンダーサマリーのスキーマを定義する。
"""

from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

Suitability = Literal["optimal", "suitable", "risky", "not_recommended"]


# ---------------------------------------------------------------------------
# 月別適性
# ---------------------------------------------------------------------------

class MonthSuitability(BaseModel):
    """1か月分の植え付け適性。

    フロントエンド由来のcamelCaseキー（``monthNumber`` 等）も受け付ける。
    """

    model_config = ConfigDict(frozen=True)

    month_number: int = Field(
        ...,
        ge=1,
        le=12,
        validation_alias=AliasChoices("month_number", "monthNumber"),
        description="月番号（1〜12）",
    )
    suitability: Suitability
    suitability_score: float | None = Field(
        default=None,
        validation_alias=AliasChoices("suitability_score", "suitabilityScore"),
    )
    notes: str | None = None


class Period(BaseModel):
    """同一適性が連続する月の範囲。

    ``crosses_year_boundary`` が真の場合のみ ``start_month > end_month`` となる。
    """

    model_config = ConfigDict(frozen=True)

    start_month: int = Field(..., ge=1, le=12)
    end_month: int = Field(..., ge=1, le=12)
    crosses_year_boundary: bool = False


# ---------------------------------------------------------------------------
# カレンダーサマリー
# ---------------------------------------------------------------------------

class CalendarRequest(BaseModel):
    """カレンダー（最大12か月分）を受け取るリクエスト。"""

    calendar: list[MonthSuitability] = Field(default_factory=list, max_length=12)

    @model_validator(mode="after")
    def _check_unique_months(self) -> "CalendarRequest":
        seen: set[int] = set()
        for record in self.calendar:
            if record.month_number in seen:
                raise ValueError(
                    f"Duplicate month number in calendar: {record.month_number}"
                )
            seen.add(record.month_number)
        return self


class CalendarSummaryResponse(BaseModel):
    """適性ごとの推奨植え付け期間。

    ``optimal`` は常に返す。``suitable`` / ``risky`` は該当月がある場合のみ。
    """

    optimal: str = Field(..., description="例: 'March to May, October'")
    suitable: str | None = None
    risky: str | None = None


class MonthDetail(BaseModel):
    """カレンダー上で選択された月の詳細。"""

    month_number: int
    month_name: str
    suitability: Suitability
    label: str
    css_class: str
    notes: str
