"""連続期間サマライザ。

月ごとの適性レコードから連続する月の範囲を求め、
``"March to May, October"`` のような表示用文字列に変換する。
カレンダーサマリーAPIと予測レスポンスの整形の両方から利用する。
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from garden_forecast.core.exceptions import InvalidMonthError
from garden_forecast.schemas.calendar import Period

MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

NO_PERIODS = "None"


def month_name(month: int) -> str:
    """月番号（1〜12）から英語の月名を返す。

    Raises:
        InvalidMonthError: 範囲外の月番号。
    """
    return MONTH_NAMES[_validate(month) - 1]


def short_month_name(month: int) -> str:
    """月番号から3文字の略称（``"Mar"`` 等）を返す。"""
    return month_name(month)[:3]


def _validate(month: Any) -> int:
    # bool は int のサブクラスなので明示的に除外する
    if isinstance(month, bool) or not isinstance(month, int):
        raise InvalidMonthError(month)
    if not 1 <= month <= 12:
        raise InvalidMonthError(month)
    return month


def _month_number(record: Any) -> int:
    """レコードから月番号を取り出す。

    ``MonthSuitability`` 等の ``month_number`` 属性を持つオブジェクト、
    ``month_number`` / ``monthNumber`` キーを持つ辞書、素の int を受け付ける。
    """
    if isinstance(record, int):
        return _validate(record)
    if isinstance(record, Mapping):
        value = record.get("month_number", record.get("monthNumber"))
    else:
        value = getattr(record, "month_number", None)
        if value is None:
            value = getattr(record, "monthNumber", None)
    return _validate(value)


def find_periods(months: Iterable[Any], *, wrap_year: bool = False) -> list[Period]:
    """月の集合を連続期間のリストに分割する。

    入力は同一の適性で絞り込み済みであることを前提とし、適性自体は見ない。
    月番号を昇順に並べ、直前の月 + 1 であれば同じ期間を延長し、
    そうでなければ期間を閉じて新しい期間を開始する。
    重複した月番号は1つにまとめる。

    ``wrap_year`` が偽の場合、12月と1月は隣接とみなさない。
    真の場合、1月始まりの先頭期間と12月終わりの末尾期間を
    年をまたぐ1つの期間に統合し、リストの末尾に置く。

    Args:
        months: 月番号を持つレコードの集合（順不同）。
        wrap_year: 年末年始をまたぐ期間を統合するか。

    Returns:
        Period のリスト。入力が空なら空リスト。

    Raises:
        InvalidMonthError: 1〜12以外の月番号を含む場合。
    """
    numbers = sorted({_month_number(record) for record in months})
    if not numbers:
        return []

    periods: list[Period] = []
    start = end = numbers[0]
    for month in numbers[1:]:
        if month == end + 1:
            end = month
            continue
        periods.append(Period(start_month=start, end_month=end))
        start = end = month
    periods.append(Period(start_month=start, end_month=end))

    if (
        wrap_year
        and len(periods) > 1
        and periods[0].start_month == 1
        and periods[-1].end_month == 12
    ):
        first = periods.pop(0)
        last = periods.pop()
        periods.append(
            Period(
                start_month=last.start_month,
                end_month=first.end_month,
                crosses_year_boundary=True,
            ),
        )

    return periods


def format_period(period: Period) -> str:
    """期間を ``"March"`` または ``"March to May"`` 形式に整形する。"""
    if period.start_month == period.end_month:
        return month_name(period.start_month)
    return f"{month_name(period.start_month)} to {month_name(period.end_month)}"


def summarize_periods(months: Iterable[Any] | None) -> str:
    """同一適性の月集合を表示用の期間文字列に要約する。

    12月と1月は連結せず、昇順のまま並べる（``{12, 1}`` は ``"January, December"``）。

    Args:
        months: 単一の適性で絞り込み済みの月レコード。

    Returns:
        カンマ区切りの期間文字列。入力が空なら ``"None"``。
    """
    records = list(months or ())
    if not records:
        return NO_PERIODS
    return ", ".join(format_period(period) for period in find_periods(records))
