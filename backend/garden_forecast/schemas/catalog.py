"""カタログ（作物・気候帯・地域）関連のPydanticスキーマ。"""

from __future__ import annotations

from pydantic import BaseModel


class CropSummary(BaseModel):
    """予測可能な作物。"""

    id: str
    name: str
    image: str | None = None


class CropListResponse(BaseModel):
    """作物一覧レスポンス。"""

    crops: list[CropSummary]


class ClimateZone(BaseModel):
    """気候帯。"""

    id: str
    name: str
    description: str | None = None


class ClimateZoneListResponse(BaseModel):
    """気候帯一覧レスポンス。"""

    climate_zones: list[ClimateZone]


class Region(BaseModel):
    """国内の地域と、その気候帯。"""

    id: str
    name: str
    climate_zone: str


class RegionListResponse(BaseModel):
    """地域一覧レスポンス。"""

    country: str
    regions: list[Region]
