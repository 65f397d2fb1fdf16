"""予測計算ロジック。

収量、植え付けカレンダー、リスク評価を気候・栽培環境・経験値から算出する。
入出力はいずれもカタログJSON由来の辞書。
"""

from __future__ import annotations

from typing import Any

ALL_MONTHS: tuple[int, ...] = tuple(range(1, 13))

PROTECTED_ENVIRONMENTS = ("protected", "cooled")


# ---------------------------------------------------------------------------
# 収量
# ---------------------------------------------------------------------------

def calculate_yield(
    base_yield: dict[str, float],
    climate: dict[str, Any],
    environment: str,
    yield_factors: dict[str, Any],
    crop: str,
    experience: str,
) -> dict[str, float]:
    """1平方メートルあたりの収量範囲を算出する。

    気候・環境・経験の各係数（未定義または0なら1）を基準収量に掛け、
    小数点1桁に丸める。

    Returns:
        ``{"min": float, "max": float}``
    """
    climate_multiplier = (
        yield_factors.get("climate", {}).get(climate["id"], {}).get(crop) or 1
    )
    environment_multiplier = (
        yield_factors.get("environment", {}).get(environment, {}).get(crop) or 1
    )
    experience_multiplier = (
        yield_factors.get("experience", {}).get(experience, {}).get(crop) or 1
    )
    factor = climate_multiplier * environment_multiplier * experience_multiplier

    return {
        "min": round(base_yield["min"] * factor, 1),
        "max": round(base_yield["max"] * factor, 1),
    }


# ---------------------------------------------------------------------------
# 植え付けカレンダー
# ---------------------------------------------------------------------------

def has_adjacent_month(month: int, months: list[int]) -> bool:
    """前月または翌月が ``months`` に含まれるか。12月と1月は隣接とみなす。"""
    prev_month = 12 if month == 1 else month - 1
    next_month = 1 if month == 12 else month + 1
    return prev_month in months or next_month in months


def calculate_planting_calendar(
    crop_planting_months: dict[str, dict[str, list[int]]],
    climate: dict[str, Any],
    environment: str,
) -> list[dict[str, Any]]:
    """作物と気候から12か月分の適性カレンダーを生成する。

    保護環境（``protected`` / ``cooled``）では risky 月を suitable に昇格し、
    optimal / suitable に隣接する残りの月を新たな risky とする。

    Args:
        crop_planting_months: 気候IDごとの ``optimal`` / ``suitable`` / ``risky`` 月。
        climate: 気候データ。
        environment: 栽培環境。

    Returns:
        ``{"month": int, "suitability": str}`` の12要素リスト。
    """
    planting = crop_planting_months.get(climate["id"]) or {}
    optimal = list(planting.get("optimal", []))
    suitable = list(planting.get("suitable", []))
    risky = list(planting.get("risky", []))

    if environment in PROTECTED_ENVIRONMENTS:
        suitable = suitable + [
            month
            for month in risky
            if month not in suitable and month not in optimal
        ]
        favourable = optimal + suitable
        risky = [
            month
            for month in ALL_MONTHS
            if month not in favourable and has_adjacent_month(month, favourable)
        ]

    calendar: list[dict[str, Any]] = []
    for month in ALL_MONTHS:
        if month in optimal:
            suitability = "optimal"
        elif month in suitable:
            suitability = "suitable"
        elif month in risky:
            suitability = "risky"
        else:
            suitability = "not_recommended"
        calendar.append({"month": month, "suitability": suitability})

    return calendar


# ---------------------------------------------------------------------------
# リスク評価
# ---------------------------------------------------------------------------

def _raise_severity(severity: str) -> str:
    if severity == "medium":
        return "high"
    if severity == "low":
        return "medium"
    return severity


def _lower_severity(severity: str) -> str:
    if severity == "high":
        return "medium"
    if severity == "medium":
        return "low"
    return severity


def _adjust_for_climate(risk: dict[str, Any], climate_id: str) -> str:
    severity = risk["severity"]
    category = risk["category"]
    description = (risk.get("description") or "").lower()

    if category in ("Temperature Extremes", "Cold Sensitivity"):
        if climate_id in ("tropical", "subtropical"):
            return _lower_severity(severity)
        if climate_id in ("continental", "temperate", "oceanic"):
            return _raise_severity(severity)

    elif category == "Disease Pressure":
        if climate_id in ("tropical", "subtropical", "oceanic"):
            return _raise_severity(severity)
        if climate_id in ("arid", "semiarid"):
            return _lower_severity(severity)

    elif category in ("Pest Challenges", "Pest Vulnerability", "Pest Issues"):
        if climate_id in ("tropical", "subtropical"):
            return _raise_severity(severity)
        if climate_id in ("continental", "temperate") and (
            "aphid" in description or "mite" in description
        ):
            return _lower_severity(severity)

    elif category in ("Moisture Balance", "Water Scarcity"):
        if climate_id in ("arid", "semiarid"):
            return _raise_severity(severity)
        if climate_id in ("oceanic", "tropical"):
            return _lower_severity(severity)

    return severity


def assess_risk_factors(
    crop_risks: list[dict[str, Any]] | None,
    climate: dict[str, Any],
    environment: str,
) -> list[dict[str, Any]]:
    """作物固有のリスクを気候と栽培環境に応じて再評価する。

    元のリスク辞書は変更せず、深刻度を調整したコピーを返す。
    保護環境では病害・害虫以外のリスクを1段階下げ、
    ``protected`` 環境では湿度により病害リスクを1段階上げる。
    """
    if not crop_risks:
        return []

    assessed: list[dict[str, Any]] = []
    for risk in crop_risks:
        adjusted = dict(risk)
        adjusted["severity"] = _adjust_for_climate(risk, climate["id"])

        category = risk["category"]
        if environment in PROTECTED_ENVIRONMENTS:
            if "Disease" not in category and "Pest" not in category:
                adjusted["severity"] = _lower_severity(adjusted["severity"])
            if environment == "protected" and "Disease" in category:
                adjusted["severity"] = _raise_severity(adjusted["severity"])

        assessed.append(adjusted)

    return assessed
