"""カタログデータリポジトリ。

作物・気候帯・地域・収量係数をJSONファイルから読み込み、
プロセス内にキャッシュする。
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from garden_forecast.core.exceptions import CatalogError
from garden_forecast.schemas.catalog import ClimateZone, CropSummary, Region

logger = logging.getLogger(__name__)

CROPS_FILE = "crops.json"
CLIMATES_FILE = "climates.json"
REGIONS_FILE = "regions.json"
YIELD_FACTORS_FILE = "yield_factors.json"


class CatalogRepository:
    """JSONファイルベースのカタログデータアクセス。"""

    def __init__(self, data_dir: Path) -> None:
        self.data_dir = Path(data_dir)
        self._cache: dict[str, Any] = {}

    def _load(self, filename: str) -> Any:
        """JSONファイルを読み込む。2回目以降はキャッシュを返す。

        Raises:
            CatalogError: ファイルの読み込みまたはパースに失敗した場合。
        """
        if filename in self._cache:
            return self._cache[filename]

        path = self.data_dir / filename
        try:
            with path.open(encoding="utf-8") as fp:
                data = json.load(fp)
        except (OSError, json.JSONDecodeError) as exc:
            logger.error("Error reading catalog file %s: %s", path, exc)
            raise CatalogError(f"Failed to load {filename}") from exc

        self._cache[filename] = data
        return data

    # ------------------------------------------------------------------
    # 作物
    # ------------------------------------------------------------------

    def get_crop(self, crop_id: str) -> dict[str, Any] | None:
        """作物IDに一致する作物データを返す。存在しなければ None。"""
        return next(
            (crop for crop in self._load(CROPS_FILE) if crop["id"] == crop_id),
            None,
        )

    def list_crops(self) -> list[CropSummary]:
        """予測可能な作物の一覧。"""
        return [
            CropSummary(id=crop["id"], name=crop["name"], image=crop.get("image"))
            for crop in self._load(CROPS_FILE)
        ]

    # ------------------------------------------------------------------
    # 気候帯
    # ------------------------------------------------------------------

    def get_climate(self, climate_id: str) -> dict[str, Any] | None:
        """気候帯IDに一致する気候データを返す。存在しなければ None。"""
        return next(
            (
                climate
                for climate in self._load(CLIMATES_FILE)
                if climate["id"] == climate_id
            ),
            None,
        )

    def list_climate_zones(self) -> list[ClimateZone]:
        """気候帯の一覧。"""
        return [
            ClimateZone(
                id=climate["id"],
                name=climate["name"],
                description=climate.get("description"),
            )
            for climate in self._load(CLIMATES_FILE)
        ]

    # ------------------------------------------------------------------
    # 地域・係数
    # ------------------------------------------------------------------

    def list_regions(self, country: str) -> list[Region]:
        """国コードに属する地域の一覧。未知の国は空リスト。"""
        country_data = next(
            (c for c in self._load(REGIONS_FILE) if c["code"] == country),
            None,
        )
        if country_data is None:
            return []

        return [
            Region(
                id=region["id"],
                name=region["name"],
                climate_zone=region["climateZone"],
            )
            for region in country_data.get("regions", [])
        ]

    def get_yield_factors(self) -> dict[str, Any]:
        """気候・環境・経験ごとの収量係数。"""
        return self._load(YIELD_FACTORS_FILE)
